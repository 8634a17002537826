"""
Command-line interface.

Usage:
  worddiff run --config worddiff.yaml
  worddiff compare original.txt transformed.txt [--json] [--strategy linear]
  worddiff stats --history transformation_history.json [--days 7]
"""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import List, Optional

from .config import WordDiffConfig
from .history import TransformationHistory
from .pipeline import run_from_config
from .report import render_marked_text, summary_line
from .worddiff import compute_word_diff


def _compare(args: argparse.Namespace) -> None:
    original_text = Path(args.original).read_text(encoding="utf-8")
    transformed_text = Path(args.transformed).read_text(encoding="utf-8")
    result = compute_word_diff(original_text, transformed_text, strategy=args.strategy)

    if args.json:
        print(result.model_dump_json(indent=2))
        return

    print(summary_line(result))
    print()
    print(f"Original (-{result.removed_count} words):")
    print(render_marked_text(result.original_diff))
    print()
    print(f"Transformed (+{result.added_count} words):")
    print(render_marked_text(result.transformed_diff))


def _stats(args: argparse.Namespace) -> None:
    history = TransformationHistory.load(args.history)
    print(json.dumps(history.usage_stats(), indent=2))
    for day in history.daily(args.days):
        print(f"{day.date.isoformat()}  {day.transformation_count:4d} transformations  {day.word_count:6d} words")


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(prog="worddiff", description="Word-level diff of an original and a rewritten text.")
    sub = parser.add_subparsers(dest="cmd", required=True)

    run_p = sub.add_parser("run", help="Run WordDiff using a YAML config.")
    run_p.add_argument("--config", required=True, help="Path to YAML config file.")

    cmp_p = sub.add_parser("compare", help="Diff two text files and print the result.")
    cmp_p.add_argument("original", help="Path to the original text.")
    cmp_p.add_argument("transformed", help="Path to the transformed text.")
    cmp_p.add_argument("--json", action="store_true", help="Print the diff result as JSON.")
    cmp_p.add_argument("--strategy", choices=["auto", "table", "linear"], default="auto", help="LCS strategy.")

    stats_p = sub.add_parser("stats", help="Show usage statistics from a history file.")
    stats_p.add_argument("--history", required=True, help="Path to the history JSON file.")
    stats_p.add_argument("--days", type=int, default=7, help="Number of days to list.")

    args = parser.parse_args(argv)

    if args.cmd == "run":
        cfg = WordDiffConfig.from_yaml(args.config)
        run_from_config(cfg)
    elif args.cmd == "compare":
        _compare(args)
    elif args.cmd == "stats":
        _stats(args)
