"""Normalization of untrusted resume payloads before decoding."""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable

from .resume import FORMAT_VERSION
from .types import ContactKind, SectionKind

LOGGER = logging.getLogger(__name__)

ALLOWED_TOP_LEVEL_KEYS = {
    "format_version",
    "id",
    "full_name",
    "location",
    "homepage",
    "contacts",
    "sections",
}
STRING_KEYS = {"id", "full_name", "location", "homepage"}


def _known_fields(payload: Any) -> Dict[str, Any]:
    if not isinstance(payload, dict):
        LOGGER.warning("Ignoring resume payload of type %s", type(payload).__name__)
        return {}
    return {key: value for key, value in payload.items() if key in ALLOWED_TOP_LEVEL_KEYS}


def _stringify_fields(entry: Dict[str, Any], string_keys: Iterable[str]) -> None:
    for key in list(entry.keys()):
        value = entry[key]
        if key not in string_keys or value is None:
            continue
        if not isinstance(value, str):
            entry[key] = str(value).strip()


def _sanitize_keyed(items: Any, enum_cls, label: str) -> Dict[str, Any]:
    sanitized: Dict[str, Any] = {}
    if not isinstance(items, dict):
        return sanitized
    for key, value in items.items():
        try:
            kind = enum_cls.from_key(key)
        except ValueError:
            LOGGER.warning("Dropping %s with unknown kind %r", label, key)
            continue
        if value in (None, ""):
            LOGGER.warning("Dropping empty %s %s", label, kind.name)
            continue
        sanitized[kind.name] = value
    return sanitized


def sanitize_resume_payload(payload: Dict[str, Any]) -> Dict[str, Any]:
    """Normalize *payload* so :func:`resume_model.schema.resume_from_dict` accepts it."""

    sanitized = _known_fields(payload)
    _stringify_fields(sanitized, STRING_KEYS)
    sanitized.setdefault("format_version", FORMAT_VERSION)
    for key in ("location", "homepage"):
        if sanitized.get(key) is None:
            sanitized[key] = ""

    contacts = _sanitize_keyed(sanitized.get("contacts"), ContactKind, "contact")
    sanitized["contacts"] = {key: str(value).strip() for key, value in contacts.items()}

    sections = _sanitize_keyed(sanitized.get("sections"), SectionKind, "section")
    sanitized["sections"] = {key: value for key, value in sections.items() if isinstance(value, dict)}
    return sanitized


__all__ = ["sanitize_resume_payload"]
