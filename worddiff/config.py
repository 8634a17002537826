"""
YAML-driven configuration for WordDiff.

Design choice:
- Put all parameters in YAML; the engine itself takes plain arguments.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal, Optional

import yaml
from pydantic import BaseModel, Field

from .lcs import DEFAULT_TABLE_CELL_LIMIT


class ProjectConfig(BaseModel):
    original_path: str
    transformed_path: str
    output_dir: str = "diff_output"
    label: str = ""  # tone/style of the rewrite, stored with history entries


class DiffConfig(BaseModel):
    strategy: Literal["auto", "table", "linear"] = "auto"
    table_cell_limit: int = Field(DEFAULT_TABLE_CELL_LIMIT, gt=0)


class ReportConfig(BaseModel):
    title: str = "Text Transformation Diff"
    write_json: bool = True
    write_pdf: bool = False
    truncate_words: int = Field(0, ge=0)  # 0 = render every word


class HistoryConfig(BaseModel):
    enabled: bool = False
    path: str = "transformation_history.json"
    max_entries: Optional[int] = Field(1000, gt=0)


class RuntimeConfig(BaseModel):
    verbose: bool = True


class WordDiffConfig(BaseModel):
    project: ProjectConfig
    diff: DiffConfig = Field(default_factory=DiffConfig)
    report: ReportConfig = Field(default_factory=ReportConfig)
    history: HistoryConfig = Field(default_factory=HistoryConfig)
    runtime: RuntimeConfig = Field(default_factory=RuntimeConfig)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "WordDiffConfig":
        path = Path(path)
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
        return cls.model_validate(data)
