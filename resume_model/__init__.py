"""Top-level package for the resume record model."""

from .resume import InvalidArgumentError, Resume
from .schema import resume_from_dict, resume_to_dict
from .types import ContactKind, SectionKind

__all__ = [
    "ContactKind",
    "InvalidArgumentError",
    "Resume",
    "SectionKind",
    "resume_from_dict",
    "resume_to_dict",
]
