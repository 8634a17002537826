"""
Render a word diff: inline markers for terminals, and a PDF report.
"""

from __future__ import annotations

from typing import List, Sequence

from reportlab.lib.pagesizes import A4
from reportlab.lib.units import cm
from reportlab.platypus import SimpleDocTemplate, Paragraph, Spacer
from reportlab.lib.styles import getSampleStyleSheet

from .models import ChangeType, TextDiffResult, WordDiffEntry

REMOVED_BG = "#fee2e2"
REMOVED_FG = "#991b1b"
ADDED_BG = "#dcfce7"
ADDED_FG = "#166534"


def render_marked_text(entries: Sequence[WordDiffEntry]) -> str:
    """Join words with single spaces; removed words as [-w-], added words as {+w+}."""
    parts: List[str] = []
    for e in entries:
        if e.change_type is ChangeType.REMOVED:
            parts.append(f"[-{e.word}-]")
        elif e.change_type is ChangeType.ADDED:
            parts.append(f"{{+{e.word}+}}")
        else:
            parts.append(e.word)
    return " ".join(parts)


def summary_line(result: TextDiffResult) -> str:
    return f"+{result.added_count} -{result.removed_count} words changed"


def _escape_for_rl(s: str) -> str:
    """Basic escaping for ReportLab Paragraph markup."""
    return s.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def _highlight(word: str, bg: str, fg: str) -> str:
    return f"<font backColor='{bg}' color='{fg}'>{_escape_for_rl(word)}</font>"


def _diff_markup(entries: Sequence[WordDiffEntry], truncate_words: int = 0) -> str:
    shown = entries[:truncate_words] if truncate_words else entries
    parts: List[str] = []
    for e in shown:
        if e.change_type is ChangeType.REMOVED:
            parts.append(_highlight(e.word, REMOVED_BG, REMOVED_FG))
        elif e.change_type is ChangeType.ADDED:
            parts.append(_highlight(e.word, ADDED_BG, ADDED_FG))
        else:
            parts.append(_escape_for_rl(e.word))
    if len(shown) < len(entries):
        parts.append(f"<i>...[{len(entries) - len(shown)} more words]...</i>")
    return " ".join(parts)


def save_diff_report_pdf(
    result: TextDiffResult,
    out_pdf_path: str,
    *,
    title: str = "Text Transformation Diff",
    truncate_words: int = 0,
) -> None:
    styles = getSampleStyleSheet()
    story = []

    story.append(Paragraph(f"<b>{_escape_for_rl(title)}</b>", styles["Title"]))
    story.append(Spacer(1, 0.5 * cm))

    story.append(Paragraph(f"<b>Words added:</b> {result.added_count}", styles["Normal"]))
    story.append(Paragraph(f"<b>Words removed:</b> {result.removed_count}", styles["Normal"]))
    story.append(Spacer(1, 0.5 * cm))

    story.append(Paragraph(f"<b>Original</b> (-{result.removed_count} words)", styles["Heading3"]))
    story.append(Paragraph(_diff_markup(result.original_diff, truncate_words), styles["BodyText"]))
    story.append(Spacer(1, 0.4 * cm))

    story.append(Paragraph(f"<b>Transformed</b> (+{result.added_count} words)", styles["Heading3"]))
    story.append(Paragraph(_diff_markup(result.transformed_diff, truncate_words), styles["BodyText"]))
    story.append(Spacer(1, 0.6 * cm))

    story.append(
        Paragraph(
            "<b>Legend:</b> "
            f"{_highlight('removed', REMOVED_BG, REMOVED_FG)} deleted words, "
            f"{_highlight('added', ADDED_BG, ADDED_FG)} added words",
            styles["Normal"],
        )
    )

    doc = SimpleDocTemplate(
        out_pdf_path,
        pagesize=A4,
        leftMargin=2 * cm,
        rightMargin=2 * cm,
        topMargin=2 * cm,
        bottomMargin=2 * cm,
    )
    doc.build(story)
