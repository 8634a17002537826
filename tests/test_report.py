from worddiff.report import _diff_markup, render_marked_text, save_diff_report_pdf, summary_line
from worddiff.worddiff import compute_word_diff


def test_render_marked_text_marks_both_sides():
    result = compute_word_diff("I like apples", "I really like oranges")
    assert render_marked_text(result.original_diff) == "I like [-apples-]"
    assert render_marked_text(result.transformed_diff) == "I {+really+} like {+oranges+}"


def test_render_marked_text_empty():
    assert render_marked_text([]) == ""


def test_summary_line():
    result = compute_word_diff("a b c", "a x")
    assert summary_line(result) == "+1 -2 words changed"


def test_markup_escapes_and_truncates():
    result = compute_word_diff("", "<b> & more words")
    markup = _diff_markup(result.transformed_diff, truncate_words=2)
    assert "&lt;b&gt;" in markup
    assert "&amp;" in markup
    assert "words</font>" not in markup
    assert "[2 more words]" in markup


def test_save_diff_report_pdf(tmp_path):
    out = tmp_path / "report.pdf"
    result = compute_word_diff("the quick fox & friends", "the quick brown fox <3")
    save_diff_report_pdf(result, str(out), title="Diff <test>")
    assert out.read_bytes().startswith(b"%PDF")
