"""
Word-level diff of an original and a transformed text.

Key idea:
- Tokenize both texts on whitespace.
- Compute one LCS of the two token sequences.
- Walk each side against the LCS to mark unchanged vs removed/added words.
- Count additions and removals.

Pure and stateless: every call builds its own tokens, DP rows and result.
"""

from __future__ import annotations

from typing import List, Sequence

from .lcs import DEFAULT_TABLE_CELL_LIMIT, Strategy, longest_common_subsequence
from .models import ChangeType, DiffStats, Role, TextDiffResult, WordDiffEntry
from .utils import tokenize


def align(tokens: Sequence[str], lcs: Sequence[str], role: Role) -> List[WordDiffEntry]:
    """
    Classify each token of one side against the LCS.
    Greedy left-to-right: a token equal to the next unmatched LCS token is
    unchanged and consumes it; anything else is removed (original side) or
    added (transformed side).
    """
    other = ChangeType.REMOVED if role is Role.ORIGINAL else ChangeType.ADDED

    entries: List[WordDiffEntry] = []
    cursor = 0
    for pos, word in enumerate(tokens):
        if cursor < len(lcs) and word == lcs[cursor]:
            entries.append(WordDiffEntry(word=word, change_type=ChangeType.UNCHANGED, position=pos))
            cursor += 1
        else:
            entries.append(WordDiffEntry(word=word, change_type=other, position=pos))
    return entries


def aggregate(original_diff: Sequence[WordDiffEntry], transformed_diff: Sequence[WordDiffEntry]) -> DiffStats:
    return DiffStats(
        added_count=sum(1 for e in transformed_diff if e.change_type is ChangeType.ADDED),
        removed_count=sum(1 for e in original_diff if e.change_type is ChangeType.REMOVED),
    )


def compute_word_diff(
    original_text: str,
    transformed_text: str,
    *,
    strategy: Strategy = "auto",
    table_cell_limit: int = DEFAULT_TABLE_CELL_LIMIT,
) -> TextDiffResult:
    """Diff two texts word by word. Defined for every pair of strings, including empty ones."""
    original_tokens = tokenize(original_text)
    transformed_tokens = tokenize(transformed_text)

    lcs = longest_common_subsequence(
        original_tokens,
        transformed_tokens,
        strategy=strategy,
        table_cell_limit=table_cell_limit,
    )

    original_diff = align(original_tokens, lcs, Role.ORIGINAL)
    transformed_diff = align(transformed_tokens, lcs, Role.TRANSFORMED)
    stats = aggregate(original_diff, transformed_diff)

    return TextDiffResult(
        original_diff=original_diff,
        transformed_diff=transformed_diff,
        added_count=stats.added_count,
        removed_count=stats.removed_count,
    )
