"""Course record model shared by the table, loader and shell.

Add fields to `Course` if the input format grows; the table only ever keys on
`number`.
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field


class Course(BaseModel):
    """A single catalog entry keyed by its course number."""

    number: str
    title: str = ""
    prerequisites: List[str] = Field(default_factory=list)

    @classmethod
    def not_found(cls) -> "Course":
        """Sentinel returned by lookups that want a record rather than `None`."""
        return cls(number="")

    @property
    def is_empty(self) -> bool:
        return not self.number

    def describe(self) -> List[str]:
        """Render the two-line detail view used by single-course lookups."""
        return [
            f"{self.number}, {self.title}",
            "Prerequisites: " + " ".join(self.prerequisites),
        ]
