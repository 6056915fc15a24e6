"""The resume record: identity, contacts and categorised sections of one person."""

from __future__ import annotations

import logging
import uuid
from typing import Any, Dict, Optional

from .sections import Section
from .types import ContactKind, SectionKind

LOGGER = logging.getLogger(__name__)

FORMAT_VERSION = 1


class InvalidArgumentError(ValueError):
    """Raised when a required resume field is missing."""


def _require(value: Optional[str], message: str) -> str:
    if value is None:
        raise InvalidArgumentError(message)
    return value


def generate_random_id() -> str:
    """Return a random UUID4 string used as a resume identifier."""

    return str(uuid.uuid4())


class Resume:
    """Professional profile of a person.

    Every instance gets a random unique id on creation, which is the only
    input to :func:`hash` and the tie breaker when sorting by full name.

    Ordering compares ``full_name`` then ``id`` while equality compares every
    field, so two records can be neither less nor greater than each other
    and still be unequal.
    """

    def __init__(self, full_name: str, location: str = "", homepage: str = "") -> None:
        self._full_name = _require(full_name, "Full name must not be empty!")
        self._location = _require(location, "Location must not be empty!")
        self._homepage = _require(homepage, "Homepage must not be empty!")
        self._id = generate_random_id()
        self._contacts: Dict[ContactKind, str] = {}
        self._sections: Dict[SectionKind, Section] = {}
        LOGGER.debug("Created resume %s for %s", self._id, full_name)

    @classmethod
    def of(cls, full_name: str, location: str = "", homepage: str = "") -> "Resume":
        """Create a resume; location and homepage default to empty strings."""

        return cls(full_name, location, homepage)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Resume):
            return NotImplemented
        return (
            self._id == other._id
            and self._full_name == other._full_name
            and self._location == other._location
            and self._homepage == other._homepage
            and self._contacts == other._contacts
            and self._sections == other._sections
        )

    def __hash__(self) -> int:
        return hash(self._id)

    def compare_to(self, other: "Resume") -> int:
        """Compare by full name, then by id. Returns -1, 0 or 1."""

        if self._full_name != other._full_name:
            return -1 if self._full_name < other._full_name else 1
        if self._id != other._id:
            return -1 if self._id < other._id else 1
        return 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Resume):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Resume):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Resume):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Resume):
            return NotImplemented
        return self.compare_to(other) >= 0

    def __repr__(self) -> str:
        return f"Resume(id={self._id!r}, full_name={self._full_name!r})"

    def get_id(self) -> str:
        return self._id

    def get_full_name(self) -> str:
        return self._full_name

    def get_location(self) -> str:
        return self._location

    def get_homepage(self) -> str:
        return self._homepage

    def get_contacts(self) -> Dict[ContactKind, str]:
        """Return a copy of the contacts; changing it leaves the resume intact."""

        return dict(self._contacts)

    def get_sections(self) -> Dict[SectionKind, Section]:
        """Return a copy of the sections; changing it leaves the resume intact."""

        return dict(self._sections)

    id = property(get_id)
    full_name = property(get_full_name)
    location = property(get_location)
    homepage = property(get_homepage)
    contacts = property(get_contacts)
    sections = property(get_sections)

    def set_full_name(self, full_name: str) -> None:
        self._full_name = full_name

    def set_location(self, location: str) -> None:
        self._location = location

    def set_homepage(self, homepage: str) -> None:
        self._homepage = homepage

    def add_contact(self, kind: ContactKind, value: str) -> Optional[str]:
        """Store *value* for *kind* and return the value it replaced, if any."""

        previous = self._contacts.get(kind)
        self._contacts[kind] = value
        return previous

    def add_section(self, kind: SectionKind, section: Section) -> Optional[Section]:
        """Store *section* for *kind* and return the section it replaced, if any."""

        previous = self._sections.get(kind)
        self._sections[kind] = section
        return previous

    def __getstate__(self) -> Dict[str, Any]:
        return {
            "format_version": FORMAT_VERSION,
            "id": self._id,
            "full_name": self._full_name,
            "location": self._location,
            "homepage": self._homepage,
            "contacts": dict(self._contacts),
            "sections": dict(self._sections),
        }

    def __setstate__(self, state: Dict[str, Any]) -> None:
        version = state.get("format_version")
        if version != FORMAT_VERSION:
            raise ValueError(f"Unsupported resume format version: {version}")
        self._id = state["id"]
        self._full_name = state["full_name"]
        self._location = state["location"]
        self._homepage = state["homepage"]
        self._contacts = dict(state.get("contacts") or {})
        self._sections = dict(state.get("sections") or {})


__all__ = ["FORMAT_VERSION", "InvalidArgumentError", "Resume", "generate_random_id"]
