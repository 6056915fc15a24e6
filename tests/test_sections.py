import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_model.sections import (
    ListSection,
    Organization,
    OrganizationSection,
    Position,
    TextSection,
    section_from_dict,
)
from resume_model.types import ContactKind, SectionKind


def test_list_section_strips_blank_items():
    section = ListSection(["  Python ", "", "   ", "SQL"])
    assert section.items == ["Python", "SQL"]


def test_position_normalizes_dates():
    position = Position(start_date=" 2019-01 ", end_date="PRESENT", title="Engineer")
    assert position.start_date == "2019-01"
    assert position.end_date == "Present"


def test_position_pads_months_and_treats_blank_as_unset():
    position = Position(start_date="2019-1", end_date="  ")
    assert position.start_date == "2019-01"
    assert position.end_date is None


def test_position_rejects_malformed_dates():
    with pytest.raises(ValueError):
        Position(start_date="January 2019")
    with pytest.raises(ValueError):
        Position(start_date="Present")


def test_organization_section_from_nested_dicts():
    payload = {
        "type": "organization",
        "organizations": [
            {
                "name": "ACME",
                "url": None,
                "positions": [{"start_date": "2019-01", "end_date": "2020-02", "title": "Engineer"}],
            }
        ],
    }
    section = section_from_dict(payload)
    assert isinstance(section, OrganizationSection)
    assert section.organizations == [
        Organization(name="ACME", positions=[Position(start_date="2019-01", end_date="2020-02", title="Engineer")])
    ]
    encoded = section.to_dict()
    assert encoded["type"] == "organization"
    assert encoded["organizations"][0]["positions"][0] == {
        "start_date": "2019-01",
        "end_date": "2020-02",
        "title": "Engineer",
        "description": None,
    }


def test_section_from_dict_dispatches_on_type():
    assert section_from_dict({"type": "text", "content": "Hi"}) == TextSection("Hi")
    assert section_from_dict({"type": "list", "items": ["a"]}) == ListSection(["a"])
    with pytest.raises(ValueError, match="Unsupported section type"):
        section_from_dict({"content": "no type"})


def test_sections_of_different_types_are_not_equal():
    assert TextSection("a") != ListSection(["a"])


def test_enum_from_key_accepts_names_and_titles():
    assert ContactKind.from_key("email") is ContactKind.EMAIL
    assert ContactKind.from_key("E-mail") is ContactKind.EMAIL
    assert SectionKind.from_key(SectionKind.EDUCATION) is SectionKind.EDUCATION
    assert SectionKind.EXPERIENCE.title == "Experience"
    with pytest.raises(ValueError):
        SectionKind.from_key("hobbies")
