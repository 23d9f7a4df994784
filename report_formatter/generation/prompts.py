"""Prompt and placeholder text for report generation."""

from typing import Optional

REPORT_PROMPT = """Create a well-structured academic report about: "{topic}"
{constraints}
Please format your response exactly like this structure:

Title: [Your report title here]

Abstract
[Write a concise abstract summarizing the main points of the report]

Introduction
[Write an introduction that sets up the topic and provides context]

Main Body
[Write detailed content organized into clear paragraphs. Use **bold text** for important terms and section headings within the main body. Include specific information, examples, and analysis related to the topic]

Conclusion
[Write a conclusion that summarizes key findings and insights]

References
[1] Academic Source Example
[2] Research Paper Reference
[3] Book or Article Reference

Make sure each section has substantial, informative content. Use **bold formatting** for important terms and subheadings."""

FALLBACK_REPORT = """Title: Report on {topic}

Abstract
This report provides an overview and analysis of {topic}. Due to technical limitations, this is a placeholder document.

Introduction
{topic} is significant and warrants detailed examination.

Main Body
**Key Analysis:** {topic} represents an important area of study.

Conclusion
In conclusion, {topic} deserves continued attention.

References
[1] Academic Source
[2] Research Study
[3] Historical Work"""


def length_constraints(pages: Optional[int] = None, words: Optional[int] = None) -> str:
    """Sentences asking the model for a target length."""
    constraint = ""
    if pages:
        constraint += f"The report should be about {pages} page(s). "
    if words:
        constraint += f"The report should have around {words} words. "
    return constraint.strip()


def build_report_prompt(topic: str, pages: Optional[int] = None, words: Optional[int] = None) -> str:
    """Build the structured report prompt for a topic."""
    constraints = length_constraints(pages, words)
    return REPORT_PROMPT.format(
        topic=topic.strip(),
        constraints=f"\n{constraints}\n" if constraints else "",
    )


def fallback_report(topic: str) -> str:
    """Placeholder report used when the model cannot be reached."""
    return FALLBACK_REPORT.format(topic=topic.strip())
