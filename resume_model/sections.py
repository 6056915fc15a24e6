"""Section value types stored in a resume."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional


def _parse_month(value: Optional[str], allow_present: bool = False) -> Optional[str]:
    """Return *value* as ``YYYY-MM`` (or ``"Present"`` when allowed); blank means unset."""

    text = (value or "").strip()
    if not text:
        return None
    if allow_present and text.lower() == "present":
        return "Present"
    return datetime.strptime(text, "%Y-%m").strftime("%Y-%m")


class Section:
    """Base class for the content of one resume section."""

    section_type = ""

    def to_dict(self) -> Dict[str, Any]:
        payload = asdict(self)  # type: ignore[call-overload]
        payload["type"] = self.section_type
        return payload


@dataclass
class TextSection(Section):
    """Free text block, e.g. an objective or a personal summary."""

    content: str = ""

    section_type = "text"

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "TextSection":
        return cls(content=str(payload.get("content") or ""))


@dataclass
class ListSection(Section):
    """Bulleted list of short statements."""

    items: List[str] = field(default_factory=list)

    section_type = "list"

    def __post_init__(self) -> None:
        self.items = [item.strip() for item in self.items if item and item.strip()]

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "ListSection":
        return cls(items=[str(item) for item in payload.get("items") or []])


@dataclass
class Position:
    """A period spent at an organization."""

    start_date: Optional[str] = None
    end_date: Optional[str] = None
    title: str = ""
    description: Optional[str] = None

    def __post_init__(self) -> None:
        self.start_date = _parse_month(self.start_date)
        self.end_date = _parse_month(self.end_date, allow_present=True)


@dataclass
class Organization:
    """Employer or institution with the positions held there."""

    name: str = ""
    url: Optional[str] = None
    positions: List[Position] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.positions = [item if isinstance(item, Position) else Position(**item) for item in self.positions]


@dataclass
class OrganizationSection(Section):
    """Experience or education history grouped by organization."""

    organizations: List[Organization] = field(default_factory=list)

    section_type = "organization"

    def __post_init__(self) -> None:
        self.organizations = [
            item if isinstance(item, Organization) else Organization(**item) for item in self.organizations
        ]

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "OrganizationSection":
        return cls(organizations=list(payload.get("organizations") or []))


SECTION_TYPES = {
    TextSection.section_type: TextSection,
    ListSection.section_type: ListSection,
    OrganizationSection.section_type: OrganizationSection,
}


def section_from_dict(payload: Dict[str, Any]) -> Section:
    """Build the section described by *payload* using its ``type`` key.

    Raises:
        ValueError: If the section type is missing or unknown.
    """

    section_type = payload.get("type")
    section_cls = SECTION_TYPES.get(section_type)
    if section_cls is None:
        raise ValueError(f"Unsupported section type: {section_type}")
    return section_cls.from_dict(payload)


__all__ = [
    "Section",
    "TextSection",
    "ListSection",
    "Position",
    "Organization",
    "OrganizationSection",
    "section_from_dict",
]
