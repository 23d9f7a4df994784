from report_formatter.config import BULLET_GLYPH, BULLET_SPACE_AFTER, BULLET_SPACE_BEFORE, PARAGRAPH_SPACE
from report_formatter.formatting import InlineRunRenderer, render_inline
from report_formatter.models import Align, Run, Space, WriteRun


def runs(commands):
    return [c.run for c in commands if isinstance(c, WriteRun)]


def test_empty_content_renders_nothing():
    assert render_inline("") == []
    assert render_inline("  \n \n ") == []


def test_plain_line_is_single_justified_run():
    commands = render_inline("Water is essential to life.")
    assert len(commands) == 2
    write, space = commands
    assert write.run == Run("Water is essential to life.")
    assert write.style.align is Align.JUSTIFY
    assert write.style.size == 12
    assert space == Space(PARAGRAPH_SPACE)


def test_bold_span_splits_line_into_continued_runs():
    result = runs(render_inline("This is **bold** text"))
    assert [r.text for r in result] == ["This is ", "bold", " text"]
    assert [r.bold for r in result] == [False, True, False]
    assert [r.continued for r in result] == [True, True, False]


def test_line_ending_in_bold_span_terminates_line():
    result = runs(render_inline("Ends with **bold**"))
    assert [r.text for r in result] == ["Ends with ", "bold"]
    assert result[-1].bold
    assert not result[-1].continued


def test_multiple_bold_spans():
    result = runs(render_inline("**A** and **B**"))
    assert [(r.text, r.bold) for r in result] == [("A", True), (" and ", False), ("B", True)]


def test_colon_terminated_line_gets_no_trailing_space():
    commands = render_inline("**Key points**:")
    assert not any(isinstance(c, Space) for c in commands)
    assert [r.text for r in runs(commands)] == ["Key points", ":"]


def test_plain_colon_line_still_gets_space():
    commands = render_inline("Key stages:")
    assert commands[-1] == Space(PARAGRAPH_SPACE)


def test_unmatched_markers_render_as_plain_text():
    result = runs(render_inline("a ** b"))
    assert result == [Run("a ** b")]


def test_bullet_line_leads_with_glyph():
    commands = render_inline("* item one")
    assert commands[0] == Space(BULLET_SPACE_BEFORE)
    assert commands[-1] == Space(BULLET_SPACE_AFTER)
    glyph, item = runs(commands)
    assert glyph == Run(BULLET_GLYPH, bold=False, is_bullet=True, continued=True)
    assert item == Run("item one", is_bullet=True, continued=False)
    assert commands[1].style.align is Align.LEFT


def test_bullet_with_bold_span():
    result = runs(render_inline("* **Term** means something"))
    assert [r.text for r in result] == [BULLET_GLYPH, "Term", " means something"]
    assert [r.bold for r in result] == [False, True, False]
    assert [r.continued for r in result] == [True, True, False]
    assert all(r.is_bullet for r in result)


def test_bullet_gap_is_larger_than_paragraph_gap():
    assert BULLET_SPACE_BEFORE + BULLET_SPACE_AFTER > PARAGRAPH_SPACE


def test_paragraphs_are_separated_by_extra_space():
    commands = render_inline("First.\n\nSecond.")
    assert commands == [
        WriteRun(Run("First."), commands[0].style),
        Space(PARAGRAPH_SPACE),
        Space(PARAGRAPH_SPACE),
        WriteRun(Run("Second."), commands[0].style),
        Space(PARAGRAPH_SPACE),
    ]


def test_whitespace_only_blank_line_splits_paragraphs():
    commands = render_inline("First.\n   \nSecond.")
    assert len([c for c in commands if isinstance(c, Space)]) == 3


def test_every_line_ends_with_non_continued_run(sample_text):
    result = runs(render_inline(sample_text))
    assert result
    assert not result[-1].continued
    lines = 0
    for run in result:
        if not run.continued:
            lines += 1
    assert lines == len([line for line in sample_text.split("\n") if line.strip()])


def test_base_size_is_applied():
    renderer = InlineRunRenderer(base_size=10)
    commands = list(renderer.render("Hello **there**"))
    assert {c.style.size for c in commands if isinstance(c, WriteRun)} == {10}


def test_empty_span_rules_keep_markers_as_text():
    renderer = InlineRunRenderer(span_rules=[])
    result = runs(renderer.render("This is **bold** text"))
    assert result == [Run("This is **bold** text")]
