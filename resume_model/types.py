"""Enumerations used to key resume contacts and sections."""

from __future__ import annotations

from enum import Enum


class _KeyedEnum(Enum):
    """Enum whose members carry a human readable title as their value."""

    @property
    def title(self) -> str:
        return self.value

    @classmethod
    def from_key(cls, key: str):
        """Resolve *key* by member name (any case) or by title.

        Raises:
            ValueError: If *key* matches no member.
        """

        if isinstance(key, cls):
            return key
        normalized = str(key).strip()
        member = cls.__members__.get(normalized.upper())
        if member is not None:
            return member
        for member in cls:
            if member.value.lower() == normalized.lower():
                return member
        raise ValueError(f"Unknown {cls.__name__}: {key!r}")


class ContactKind(_KeyedEnum):
    """Contact channel categories."""

    PHONE = "Phone"
    MOBILE = "Mobile"
    HOME_PHONE = "Home phone"
    SKYPE = "Skype"
    EMAIL = "E-mail"
    LINKEDIN = "LinkedIn"
    GITHUB = "GitHub"
    STACKOVERFLOW = "Stack Overflow"
    HOMEPAGE = "Homepage"


class SectionKind(_KeyedEnum):
    """Resume content block categories."""

    PERSONAL = "Personal qualities"
    OBJECTIVE = "Objective"
    ACHIEVEMENT = "Achievements"
    QUALIFICATIONS = "Qualifications"
    EXPERIENCE = "Experience"
    EDUCATION = "Education"


__all__ = ["ContactKind", "SectionKind"]
