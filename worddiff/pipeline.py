"""
High-level pipeline:
- read original and transformed texts
- compute the word diff
- write JSON and/or PDF output
- record the pair in the transformation history
"""

from __future__ import annotations

import os
from pathlib import Path

from .config import WordDiffConfig
from .history import TransformationHistory
from .models import TextDiffResult
from .report import save_diff_report_pdf, summary_line
from .worddiff import compute_word_diff


def run_from_config(cfg: WordDiffConfig) -> TextDiffResult:
    """Run the full pipeline and return the diff result."""
    os.makedirs(cfg.project.output_dir, exist_ok=True)

    json_path = os.path.join(cfg.project.output_dir, "diff.json")
    pdf_path = os.path.join(cfg.project.output_dir, "diff_report.pdf")

    original_text = Path(cfg.project.original_path).read_text(encoding="utf-8")
    transformed_text = Path(cfg.project.transformed_path).read_text(encoding="utf-8")

    if cfg.runtime.verbose:
        print(f"[DIFF] {cfg.project.original_path} -> {cfg.project.transformed_path} (strategy={cfg.diff.strategy})")

    result = compute_word_diff(
        original_text,
        transformed_text,
        strategy=cfg.diff.strategy,
        table_cell_limit=cfg.diff.table_cell_limit,
    )

    if cfg.runtime.verbose:
        print(f"[DIFF] {summary_line(result)}")

    if cfg.report.write_json:
        Path(json_path).write_text(result.model_dump_json(indent=2), encoding="utf-8")
        if cfg.runtime.verbose:
            print(f"[REPORT] JSON: {json_path}")

    if cfg.report.write_pdf:
        save_diff_report_pdf(
            result,
            pdf_path,
            title=cfg.report.title,
            truncate_words=cfg.report.truncate_words,
        )
        if cfg.runtime.verbose:
            print(f"[REPORT] PDF: {pdf_path}")

    if cfg.history.enabled:
        history = TransformationHistory.load(cfg.history.path)
        history.max_entries = cfg.history.max_entries
        history.record(cfg.project.label, original_text, transformed_text, diff=result)
        history.save(cfg.history.path)
        if cfg.runtime.verbose:
            print(f"[HISTORY] {history.total_transformations()} entries in {cfg.history.path}")

    if cfg.runtime.verbose:
        print(f"[DONE] Output dir: {cfg.project.output_dir}")

    return result
