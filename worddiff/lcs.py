"""
Longest common subsequence of two token sequences.

Two strategies return the same subsequence:
- "table": full DP table, then a single backtrack.
- "linear": keeps only a few DP rows alive and recomputes the rest from
  checkpoint rows while tracing the exact same backtrack path.

Backtrack rule (shared by both): on a token match emit it and move diagonally,
otherwise move up (drop a[i-1]) when dp[i-1][j] >= dp[i][j-1], else move left.
Ties prefer moving up; changing that picks a different LCS when it is not unique.
"""

from __future__ import annotations

from typing import List, Literal, Sequence

Strategy = Literal["auto", "table", "linear"]

DEFAULT_TABLE_CELL_LIMIT = 4_000_000

STRATEGIES = ("auto", "table", "linear")


def _next_row(prev: List[int], token: str, b: Sequence[str], width: int) -> List[int]:
    """DP row i from row i-1, where token = a[i-1]. Only columns 0..width are computed."""
    cur = [0] * (width + 1)
    for j in range(1, width + 1):
        if token == b[j - 1]:
            cur[j] = prev[j - 1] + 1
        else:
            up = prev[j]
            left = cur[j - 1]
            cur[j] = up if up >= left else left
    return cur


def _build_table(a: Sequence[str], b: Sequence[str]) -> List[List[int]]:
    n = len(b)
    dp = [[0] * (n + 1)]
    for tok in a:
        dp.append(_next_row(dp[-1], tok, b, n))
    return dp


def lcs_table(a: Sequence[str], b: Sequence[str]) -> List[str]:
    """Full-table LCS: O(|a|*|b|) time and space."""
    if not a or not b:
        return []

    dp = _build_table(a, b)

    out: List[str] = []
    i, j = len(a), len(b)
    while i > 0 and j > 0:
        if a[i - 1] == b[j - 1]:
            out.append(a[i - 1])
            i -= 1
            j -= 1
        elif dp[i - 1][j] >= dp[i][j - 1]:
            i -= 1
        else:
            j -= 1

    out.reverse()
    return out


def _trace_step(
    a: Sequence[str],
    b: Sequence[str],
    i: int,
    j: int,
    prev: List[int],
    cur: List[int],
    out: List[str],
) -> int:
    """
    Follow the backtrack path inside row i (cur) until it leaves the row.
    prev is row i-1. Returns the column at which the path enters row i-1,
    or 0 if the path hit column 0 (backtrack finished).
    """
    tok = a[i - 1]
    while j > 0:
        if tok == b[j - 1]:
            out.append(tok)
            return j - 1
        if prev[j] >= cur[j - 1]:
            return j
        j -= 1
    return 0


def _trace(
    a: Sequence[str],
    b: Sequence[str],
    lo: int,
    hi: int,
    j: int,
    row_lo: List[int],
    out: List[str],
) -> int:
    """
    Trace the backtrack path from (hi, j) until it reaches row lo.

    row_lo is DP row lo (at least columns 0..j). Rows between lo and hi are
    recomputed on demand: one checkpoint row is held per recursion level.
    Matched tokens are appended to out in backtrack (reverse) order.
    Returns the column where the path reaches row lo (0 means it ended).
    """
    if j == 0:
        return 0

    if hi - lo == 1:
        cur = _next_row(row_lo, a[lo], b, j)
        return _trace_step(a, b, hi, j, row_lo, cur, out)

    mid = (lo + hi) // 2
    row_mid = row_lo
    for i in range(lo, mid):
        row_mid = _next_row(row_mid, a[i], b, j)

    j_mid = _trace(a, b, mid, hi, j, row_mid, out)
    del row_mid
    return _trace(a, b, lo, mid, j_mid, row_lo, out)


def lcs_linear(a: Sequence[str], b: Sequence[str]) -> List[str]:
    """
    Low-memory LCS: O(|b| * log|a|) space, O(|a| * |b| * log|a|) time.
    Returns exactly what lcs_table returns.
    """
    if not a or not b:
        return []

    out: List[str] = []
    _trace(a, b, 0, len(a), len(b), [0] * (len(b) + 1), out)
    out.reverse()
    return out


def lcs_length(a: Sequence[str], b: Sequence[str]) -> int:
    """Length of the LCS using two rolling rows over the shorter sequence."""
    if len(b) > len(a):
        a, b = b, a
    if not b:
        return 0

    row = [0] * (len(b) + 1)
    for tok in a:
        row = _next_row(row, tok, b, len(b))
    return row[-1]


def resolve_strategy(
    a: Sequence[str],
    b: Sequence[str],
    strategy: str = "auto",
    table_cell_limit: int = DEFAULT_TABLE_CELL_LIMIT,
) -> str:
    if strategy not in STRATEGIES:
        raise ValueError(f"Unknown LCS strategy '{strategy}'. Expected one of: {', '.join(STRATEGIES)}.")
    if strategy != "auto":
        return strategy
    cells = (len(a) + 1) * (len(b) + 1)
    return "table" if cells <= table_cell_limit else "linear"


def longest_common_subsequence(
    a: Sequence[str],
    b: Sequence[str],
    *,
    strategy: Strategy = "auto",
    table_cell_limit: int = DEFAULT_TABLE_CELL_LIMIT,
) -> List[str]:
    """
    Longest common subsequence of a and b (exact token equality).
    Empty if either side is empty.
    """
    if resolve_strategy(a, b, strategy, table_cell_limit) == "table":
        return lcs_table(a, b)
    return lcs_linear(a, b)
