from dataclasses import dataclass, field
from typing import Tuple

# Term id used when a schedule's query string carries no term_in parameter.
# Indistinguishable from a real term "0".
UNKNOWN_TERM = "0"


@dataclass(frozen=True)
class Section:
    crn: str
    section_type: str    # e.g. "L" lecture, "B" lab, "T" tutorial
    section_number: str  # e.g. "01"

    def to_dict(self):
        return {
            "crn": self.crn,
            "sectionType": self.section_type,
            "sectionNumber": self.section_number,
        }


@dataclass(frozen=True)
class Course:
    """
    One schedule of a subject + code that is offered in some term.

    A (subject, code) pair yields one Course per schedule link on its page.
    Never built with zero sections.
    """
    subject: str
    code: str
    title: str
    term: str
    sections: Tuple[Section, ...] = field(default_factory=tuple)

    def to_dict(self):
        return {
            "code": self.code,
            "sections": [s.to_dict() for s in self.sections],
            "subject": self.subject,
            "title": self.title,
            "term": self.term,
        }

    @classmethod
    def from_dict(cls, data):
        sections = tuple(
            Section(s["crn"], s["sectionType"], s["sectionNumber"])
            for s in data.get("sections", [])
        )
        return cls(
            subject=data["subject"],
            code=data["code"],
            title=data.get("title", ""),
            term=data.get("term", UNKNOWN_TERM),
            sections=sections,
        )


@dataclass(frozen=True)
class CrawlResult:
    courses: Tuple[Course, ...]
    failed: Tuple[str, ...]  # department codes, in order of failure
