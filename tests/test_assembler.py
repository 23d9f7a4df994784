from datetime import datetime

from report_formatter.config import DEFAULT_TITLE, FALLBACK_NOTICE, TOC_HEADING
from report_formatter.formatting import assemble_document, split_sections
from report_formatter.formatting.assembler import format_date, resolve_title, toc_entries
from report_formatter.models import Align, PageKind, Section, SectionType, StartPage, WriteRun
from report_formatter.pipeline import render_report


def page_texts(page):
    return [c.run.text for c in page if isinstance(c, WriteRun)]


def test_end_to_end_scenario(sink, fixed_time):
    render_report("Title: T\nConclusion\nAll done.", sink, generated_at=fixed_time)

    assert sink.page_kinds() == [PageKind.COVER, PageKind.TOC, PageKind.SECTION]
    cover, toc, conclusion = sink.pages()

    assert "T" in page_texts(cover)
    assert page_texts(toc) == [TOC_HEADING, "1. Conclusion"]

    heading = conclusion[1]
    assert heading.run.text == "Conclusion"
    assert heading.run.bold and heading.style.underline

    body = [c for c in conclusion if isinstance(c, WriteRun)][1:]
    assert len(body) == 1
    assert body[0].run.text == "All done."
    assert body[0].style.align is Align.JUSTIFY


def test_toc_and_page_counts_match_sections(sink, fixed_time, sample_text):
    sections = render_report(sample_text + "\nIntroduction\nOnce more.", sink, generated_at=fixed_time)
    expected = len(sections) - 1

    toc = sink.pages()[1]
    assert len(page_texts(toc)) - 1 == expected
    assert sink.page_kinds().count(PageKind.SECTION) == expected


def test_section_pages_reference_their_section(sink, fixed_time):
    render_report("Abstract\nA.\nIntroduction\nB.\nAbstract\nC.", sink, generated_at=fixed_time)
    starts = [c for c in sink.commands if isinstance(c, StartPage) and c.kind is PageKind.SECTION]
    assert [s.section for s in starts] == [
        Section(SectionType.ABSTRACT, "A."),
        Section(SectionType.INTRODUCTION, "B."),
        Section(SectionType.ABSTRACT, "C."),
    ]


def test_cover_page_content(sink, fixed_time):
    render_report("Title: Rivers\nAbstract\nShort.", sink, generated_at=fixed_time)
    cover = page_texts(sink.pages()[0])
    assert cover == ["Academic Report", "Rivers", "Generated: 3/5/2024"]


def test_fallback_notice_only_when_flagged(fixed_time):
    sections = split_sections("Title: Rivers\nAbstract\nShort.")
    plain = assemble_document(sections, used_fallback=False, generated_at=fixed_time)
    flagged = assemble_document(sections, used_fallback=True, generated_at=fixed_time)

    assert FALLBACK_NOTICE not in [c.run.text for c in plain if isinstance(c, WriteRun)]
    notice = [c for c in flagged if isinstance(c, WriteRun) and c.run.text == FALLBACK_NOTICE]
    assert len(notice) == 1
    assert notice[0].style.italic
    assert notice[0].style.color == "#e74c3c"


def test_default_title_without_title_section():
    assert resolve_title([Section(SectionType.ABSTRACT, "x")]) == DEFAULT_TITLE
    assert resolve_title([Section(SectionType.TITLE, "")]) == DEFAULT_TITLE
    assert resolve_title([
        Section(SectionType.ABSTRACT, "x"),
        Section(SectionType.TITLE, "First"),
        Section(SectionType.TITLE, "Second"),
    ]) == "First"


def test_empty_section_list_gives_cover_and_empty_toc(fixed_time):
    commands = assemble_document([], generated_at=fixed_time)
    kinds = [c.kind for c in commands if isinstance(c, StartPage)]
    assert kinds == [PageKind.COVER, PageKind.TOC]
    assert DEFAULT_TITLE in [c.run.text for c in commands if isinstance(c, WriteRun)]


def test_empty_section_gets_heading_without_body(sink, fixed_time):
    render_report("Abstract\nIntroduction\nHello.", sink, generated_at=fixed_time)
    abstract_page = sink.pages()[2]
    assert page_texts(abstract_page) == ["Abstract"]
    assert "1. Abstract" in page_texts(sink.pages()[1])


def test_toc_entries_are_numbered_labels():
    sections = [
        Section(SectionType.TITLE, "T"),
        Section(SectionType.MAIN_BODY, "x"),
        Section(SectionType.REFERENCES, "y"),
    ]
    assert toc_entries(sections) == ["1. Main Body", "2. References"]


def test_format_date():
    assert format_date(datetime(2026, 10, 8)) == "10/8/2026"


def test_same_input_gives_identical_commands(fixed_time, sample_text):
    sections = split_sections(sample_text)
    first = assemble_document(sections, used_fallback=True, generated_at=fixed_time)
    second = assemble_document(split_sections(sample_text), used_fallback=True, generated_at=fixed_time)
    assert first == second
