import json

import pytest
import yaml
from pydantic import ValidationError

from worddiff import history as history_mod
from worddiff import pipeline as pipeline_mod
from worddiff.cli import main
from worddiff.config import WordDiffConfig
from worddiff.history import TransformationHistory
from worddiff.pipeline import run_from_config


@pytest.fixture
def texts(tmp_path):
    original = tmp_path / "original.txt"
    transformed = tmp_path / "transformed.txt"
    original.write_text("the quick fox jumps over the lazy dog\n", encoding="utf-8")
    transformed.write_text("the quick brown fox leaps over the dog\n", encoding="utf-8")
    return original, transformed


def _config_dict(tmp_path, original, transformed, **overrides):
    data = {
        "project": {
            "original_path": str(original),
            "transformed_path": str(transformed),
            "output_dir": str(tmp_path / "out"),
            "label": "Formal",
        },
        "report": {"write_json": True, "write_pdf": False},
        "history": {"enabled": True, "path": str(tmp_path / "out" / "history.json")},
        "runtime": {"verbose": True},
    }
    data.update(overrides)
    return data


def test_config_defaults_from_yaml(tmp_path):
    path = tmp_path / "cfg.yaml"
    path.write_text(yaml.safe_dump({"project": {"original_path": "a.txt", "transformed_path": "b.txt"}}), encoding="utf-8")

    cfg = WordDiffConfig.from_yaml(path)

    assert cfg.project.output_dir == "diff_output"
    assert cfg.diff.strategy == "auto"
    assert cfg.diff.table_cell_limit == 4_000_000
    assert cfg.history.enabled is False
    assert cfg.history.max_entries == 1000
    assert cfg.runtime.verbose is True


def test_config_rejects_unknown_strategy():
    with pytest.raises(ValidationError):
        WordDiffConfig.model_validate(
            {"project": {"original_path": "a", "transformed_path": "b"}, "diff": {"strategy": "fast"}}
        )


def test_config_requires_project():
    with pytest.raises(ValidationError):
        WordDiffConfig.model_validate({})


def test_run_from_config_writes_json_and_history(tmp_path, texts, capsys):
    cfg = WordDiffConfig.model_validate(_config_dict(tmp_path, *texts))

    result = run_from_config(cfg)

    assert result.added_count == 2  # "brown", "leaps"
    assert result.removed_count == 2  # "jumps", "lazy"

    saved = json.loads((tmp_path / "out" / "diff.json").read_text(encoding="utf-8"))
    assert saved["added_count"] == 2
    assert saved["transformed_diff"][2] == {"word": "brown", "change_type": "added", "position": 2}

    history = TransformationHistory.load(tmp_path / "out" / "history.json")
    assert history.total_transformations() == 1
    assert history.entries[0].tone_name == "Formal"
    assert history.entries[0].word_count == 4

    out = capsys.readouterr().out
    assert "[DIFF] +2 -2 words changed" in out
    assert "[DONE]" in out


def test_run_from_config_quiet_and_pdf(tmp_path, texts, capsys):
    data = _config_dict(tmp_path, *texts)
    data["report"] = {"write_json": False, "write_pdf": True}
    data["history"] = {"enabled": False}
    data["runtime"] = {"verbose": False}

    run_from_config(WordDiffConfig.model_validate(data))

    assert (tmp_path / "out" / "diff_report.pdf").exists()
    assert not (tmp_path / "out" / "diff.json").exists()
    assert capsys.readouterr().out == ""


def test_cli_compare_prints_marked_text(texts, capsys):
    main(["compare", str(texts[0]), str(texts[1])])
    out = capsys.readouterr().out
    assert "+2 -2 words changed" in out
    assert "[-jumps-]" in out
    assert "{+brown+}" in out


def test_cli_compare_json(texts, capsys):
    main(["compare", str(texts[0]), str(texts[1]), "--json", "--strategy", "linear"])
    data = json.loads(capsys.readouterr().out)
    assert data["removed_count"] == 2
    assert [e["word"] for e in data["original_diff"]][:3] == ["the", "quick", "fox"]


def test_cli_run_and_stats(tmp_path, texts, capsys):
    cfg_path = tmp_path / "worddiff.yaml"
    cfg_path.write_text(yaml.safe_dump(_config_dict(tmp_path, *texts)), encoding="utf-8")

    main(["run", "--config", str(cfg_path)])
    capsys.readouterr()

    main(["stats", "--history", str(tmp_path / "out" / "history.json"), "--days", "2"])
    out = capsys.readouterr().out
    assert '"total_transformations": 1' in out
    assert '"total_words_transformed": 4' in out
    assert len([line for line in out.splitlines() if "transformations" in line and "words" in line]) == 2


def test_cli_requires_subcommand():
    with pytest.raises(SystemExit):
        main([])


def test_run_from_config_records_history_with_the_configured_diff(tmp_path, texts, monkeypatch):
    pipeline_calls = []
    real = pipeline_mod.compute_word_diff

    def counting(original, transformed, **kwargs):
        pipeline_calls.append(kwargs)
        return real(original, transformed, **kwargs)

    def unexpected(*args, **kwargs):
        raise AssertionError("history should reuse the pipeline's diff")

    monkeypatch.setattr(pipeline_mod, "compute_word_diff", counting)
    monkeypatch.setattr(history_mod, "compute_word_diff", unexpected)

    data = _config_dict(tmp_path, *texts)
    data["diff"] = {"strategy": "linear", "table_cell_limit": 1}
    result = run_from_config(WordDiffConfig.model_validate(data))

    assert pipeline_calls == [{"strategy": "linear", "table_cell_limit": 1}]
    entry = TransformationHistory.load(tmp_path / "out" / "history.json").entries[0]
    assert entry.added_count == result.added_count
    assert entry.removed_count == result.removed_count
