"""PageContent — display strings for one generated landing page."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

from . import UnitTag


@dataclass(frozen=True, slots=True)
class Section:
    """One period block (heading + body copy)."""

    title: str
    content: str


@dataclass(frozen=True, slots=True)
class PageContent:
    """Immutable page copy derived from a rate and a unit tag.

    ``sections`` keeps the on-page order: yearly, monthly, biweekly,
    weekly, daily.
    """

    unit: UnitTag
    display_rate: str
    title: str
    meta_description: str
    h1: str
    intro: str
    sections: Mapping[str, Section] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "unit": self.unit.value,
            "display_rate": self.display_rate,
            "title": self.title,
            "meta_description": self.meta_description,
            "h1": self.h1,
            "intro": self.intro,
            "sections": {
                name: {"title": s.title, "content": s.content}
                for name, s in self.sections.items()
            },
        }
