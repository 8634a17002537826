"""
Data models: per-word diff entries and the diff result schema.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ChangeType(str, Enum):
    UNCHANGED = "unchanged"
    ADDED = "added"
    REMOVED = "removed"


class Role(str, Enum):
    """Which side of the comparison a token sequence comes from."""
    ORIGINAL = "original"
    TRANSFORMED = "transformed"


class WordDiffEntry(BaseModel):
    """One word of one side, classified against the common subsequence."""
    model_config = ConfigDict(frozen=True)

    word: str
    change_type: ChangeType
    position: int = Field(..., ge=0, description="Index of the word within its own side.")


@dataclass(frozen=True)
class DiffStats:
    added_count: int
    removed_count: int


class TextDiffResult(BaseModel):
    """
    Word diff of an original/transformed pair.

    original_diff only holds unchanged/removed words, transformed_diff only
    unchanged/added words, and the counts always match the entries.
    """
    model_config = ConfigDict(frozen=True)

    original_diff: List[WordDiffEntry] = Field(default_factory=list)
    transformed_diff: List[WordDiffEntry] = Field(default_factory=list)
    added_count: int = Field(0, ge=0)
    removed_count: int = Field(0, ge=0)

    @model_validator(mode="after")
    def _check_sides(self) -> "TextDiffResult":
        for e in self.original_diff:
            if e.change_type is ChangeType.ADDED:
                raise ValueError(f"original_diff cannot contain added words (position {e.position}).")
        for e in self.transformed_diff:
            if e.change_type is ChangeType.REMOVED:
                raise ValueError(f"transformed_diff cannot contain removed words (position {e.position}).")

        removed = sum(1 for e in self.original_diff if e.change_type is ChangeType.REMOVED)
        added = sum(1 for e in self.transformed_diff if e.change_type is ChangeType.ADDED)
        if removed != self.removed_count or added != self.added_count:
            raise ValueError(
                f"Counts do not match entries: added_count={self.added_count} (entries: {added}), "
                f"removed_count={self.removed_count} (entries: {removed})."
            )
        return self

    @property
    def changed_count(self) -> int:
        """Words added plus words removed."""
        return self.added_count + self.removed_count

    @property
    def is_identical(self) -> bool:
        return self.changed_count == 0
