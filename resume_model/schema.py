"""Structured (dict/JSON) encoding for resume records."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .resume import FORMAT_VERSION, Resume
from .sections import section_from_dict
from .types import ContactKind, SectionKind

LOGGER = logging.getLogger(__name__)


def _default_indent() -> Optional[int]:
    value = os.getenv("RESUME_MODEL_JSON_INDENT", "2")
    if value.strip().lower() in {"", "none"}:
        return None
    return int(value)


@dataclass
class SerializationConfig:
    """Options used when rendering a resume as JSON."""

    indent: Optional[int] = field(default_factory=_default_indent)
    ensure_ascii: bool = False
    sort_keys: bool = False


def resume_to_dict(resume: Resume) -> Dict[str, Any]:
    state = resume.__getstate__()
    return {
        "format_version": state["format_version"],
        "id": state["id"],
        "full_name": state["full_name"],
        "location": state["location"],
        "homepage": state["homepage"],
        "contacts": {kind.name: value for kind, value in state["contacts"].items()},
        "sections": {kind.name: section.to_dict() for kind, section in state["sections"].items()},
    }


def _keyed_items(payload: Dict[str, Any], key: str) -> Dict[str, Any]:
    value = payload.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"Field {key} must be a mapping, got {type(value).__name__}")
    return value


def resume_from_dict(payload: Dict[str, Any]) -> Resume:
    """Rebuild a :class:`Resume`, including its id, from :func:`resume_to_dict` output.

    Raises:
        ValueError: If the format version is unsupported, the id or full name
            is missing, or a contact/section key or section type is unknown.
    """

    payload = dict(payload)
    version = payload.get("format_version", FORMAT_VERSION)
    if version != FORMAT_VERSION:
        raise ValueError(f"Unsupported resume format version: {version}")
    if not payload.get("id"):
        raise ValueError("Missing required field: id")
    # full_name may hold None after set_full_name(None); only an absent key is an error.
    if "full_name" not in payload:
        raise ValueError("Missing required field: full_name")

    contacts = {ContactKind.from_key(key): value for key, value in _keyed_items(payload, "contacts").items()}
    sections = {}
    for key, value in _keyed_items(payload, "sections").items():
        if not isinstance(value, dict):
            raise ValueError(f"Section {key} must be a mapping, got {type(value).__name__}")
        sections[SectionKind.from_key(key)] = section_from_dict(value)

    resume = Resume.__new__(Resume)
    resume.__setstate__(
        {
            "format_version": FORMAT_VERSION,
            "id": payload["id"],
            "full_name": payload["full_name"],
            "location": payload.get("location", ""),
            "homepage": payload.get("homepage", ""),
            "contacts": contacts,
            "sections": sections,
        }
    )
    LOGGER.info("Decoded resume %s with %s contacts and %s sections", resume.get_id(), len(contacts), len(sections))
    return resume


def resume_to_json(resume: Resume, config: Optional[SerializationConfig] = None) -> str:
    config = config or SerializationConfig()
    return json.dumps(
        resume_to_dict(resume),
        indent=config.indent,
        ensure_ascii=config.ensure_ascii,
        sort_keys=config.sort_keys,
    )


def resume_from_json(text: str) -> Resume:
    return resume_from_dict(json.loads(text))


__all__ = [
    "SerializationConfig",
    "resume_from_dict",
    "resume_from_json",
    "resume_to_dict",
    "resume_to_json",
]
