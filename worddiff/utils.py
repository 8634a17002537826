"""
Utilities: tokenization and small text helpers.
"""

from __future__ import annotations

from typing import List

_SENTENCE_ENDINGS = frozenset(".!?。！？…⋯‼⁇⁈⁉")


def tokenize(text: str) -> List[str]:
    """
    Split text into word tokens on runs of whitespace.
    Tokens are exact substrings: no case folding, punctuation is kept.
    """
    return text.split()


def count_sentences(text: str) -> int:
    """
    Count sentences by runs of terminal punctuation (half- and full-width).
    A run like "..." or "?!" counts once, even with whitespace inside the run, so
    "Wait..." is one sentence, not three as in a per-character count.
    Text without any terminator is one sentence.
    """
    if not text.strip():
        return 0

    count = 0
    in_run = False
    for ch in text:
        if ch in _SENTENCE_ENDINGS:
            if not in_run:
                count += 1
                in_run = True
        elif in_run and ch.isspace():
            # whitespace between terminators does not start a new sentence
            continue
        else:
            in_run = False

    return count or 1
