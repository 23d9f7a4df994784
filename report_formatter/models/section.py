"""Section model for structured report text."""

import re
from dataclasses import dataclass
from enum import Enum


class SectionType(str, Enum):
    """Kinds of report sections recognized in generated text."""
    TITLE = "title"
    ABSTRACT = "abstract"
    INTRODUCTION = "introduction"
    MAIN_BODY = "main_body"
    CONCLUSION = "conclusion"
    REFERENCES = "references"

    @property
    def label(self) -> str:
        """Human readable label, e.g. ``main_body`` -> ``Main Body``."""
        return re.sub(r"\b\w", lambda m: m.group().upper(), self.value.replace("_", " "))


@dataclass(frozen=True)
class Section:
    """Represents a typed block of report content."""
    type: SectionType
    content: str = ""

    @property
    def label(self) -> str:
        return self.type.label

    @property
    def is_title(self) -> bool:
        return self.type is SectionType.TITLE
