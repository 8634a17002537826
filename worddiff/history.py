"""
Transformation history: stored before/after pairs with word and sentence counts,
plus per-day usage buckets.

This is a caller of the diff engine. The engine never reads or writes it.
"""

from __future__ import annotations

import datetime as dt
from pathlib import Path
from typing import Dict, List, Optional

from pydantic import BaseModel, Field, ValidationError

from .models import TextDiffResult
from .utils import count_sentences
from .worddiff import compute_word_diff


class TransformationEntry(BaseModel):
    tone_name: str
    original_text: str
    transformed_text: str
    timestamp: dt.datetime
    word_count: int = Field(..., ge=0, description="Words added plus words removed.")
    sentence_count: int = Field(..., ge=0, description="Sentences in the transformed text.")
    added_count: int = Field(0, ge=0)
    removed_count: int = Field(0, ge=0)


class DayStats(BaseModel):
    date: dt.date
    transformation_count: int = 0
    word_count: int = 0
    sentence_count: int = 0


def _day_key(d: dt.date) -> str:
    return d.strftime("%Y-%m-%d")


class TransformationHistory(BaseModel):
    entries: List[TransformationEntry] = Field(default_factory=list)  # most recent first
    daily_stats: Dict[str, DayStats] = Field(default_factory=dict)
    max_entries: Optional[int] = 1000

    @classmethod
    def load(cls, path: str | Path) -> "TransformationHistory":
        """Read a history file. Missing or unreadable files give an empty history."""
        path = Path(path)
        try:
            return cls.model_validate_json(path.read_text(encoding="utf-8"))
        except (OSError, ValueError, ValidationError):
            return cls()

    def save(self, path: str | Path) -> None:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.model_dump_json(indent=2), encoding="utf-8")

    def add_entry(self, entry: TransformationEntry) -> None:
        self.entries.insert(0, entry)
        if self.max_entries is not None and len(self.entries) > self.max_entries:
            del self.entries[self.max_entries:]

        # Daily buckets keep counting entries that were truncated away.
        day = entry.timestamp.date()
        stats = self.daily_stats.setdefault(_day_key(day), DayStats(date=day))
        stats.transformation_count += 1
        stats.word_count += entry.word_count
        stats.sentence_count += entry.sentence_count

    def record(
        self,
        tone_name: str,
        original_text: str,
        transformed_text: str,
        *,
        diff: Optional[TextDiffResult] = None,
        now: Optional[dt.datetime] = None,
    ) -> TransformationEntry:
        """
        Store the pair as the newest entry and return the entry.
        Pass `diff` when the pair was already diffed; otherwise it is computed here.
        """
        if diff is None:
            diff = compute_word_diff(original_text, transformed_text)
        entry = TransformationEntry(
            tone_name=tone_name,
            original_text=original_text,
            transformed_text=transformed_text,
            timestamp=now or dt.datetime.now(dt.timezone.utc),
            word_count=diff.changed_count,
            sentence_count=count_sentences(transformed_text),
            added_count=diff.added_count,
            removed_count=diff.removed_count,
        )
        self.add_entry(entry)
        return entry

    def recent(self, limit: int = 50) -> List[TransformationEntry]:
        return self.entries[:limit]

    def total_transformations(self) -> int:
        return len(self.entries)

    def total_words_transformed(self) -> int:
        return sum(e.word_count for e in self.entries)

    def total_sentences_transformed(self) -> int:
        return sum(e.sentence_count for e in self.entries)

    def usage_stats(self) -> Dict[str, int]:
        return {
            "total_transformations": self.total_transformations(),
            "total_words_transformed": self.total_words_transformed(),
            "total_sentences_transformed": self.total_sentences_transformed(),
            "history_count": len(self.entries),
        }

    def daily(self, days: int = 7, *, today: Optional[dt.date] = None) -> List[DayStats]:
        """Stats for the last `days` days ending today, oldest first. Empty days are zero-filled."""
        today = today or dt.datetime.now(dt.timezone.utc).date()
        out: List[DayStats] = []
        for i in range(days - 1, -1, -1):
            d = today - dt.timedelta(days=i)
            stats = self.daily_stats.get(_day_key(d))
            out.append(stats.model_copy() if stats else DayStats(date=d))
        return out

    def diff_for(self, index: int) -> TextDiffResult:
        """Recompute the word diff of the entry at `index` (0 = most recent)."""
        if index < 0 or index >= len(self.entries):
            raise IndexError("Entry index out of bounds")
        entry = self.entries[index]
        return compute_word_diff(entry.original_text, entry.transformed_text)

    def clear(self) -> None:
        self.entries.clear()
        self.daily_stats.clear()
