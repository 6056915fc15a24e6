"""Command-line helper that builds a resume and prints its JSON encoding."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional, Tuple

from resume_model import ContactKind, Resume, SectionKind
from resume_model.schema import SerializationConfig, resume_to_json
from resume_model.sections import ListSection, TextSection

logging.basicConfig(level=logging.INFO)


def _split_pair(text: str) -> Tuple[str, str]:
    key, sep, value = text.partition("=")
    if not sep:
        raise argparse.ArgumentTypeError(f"Expected KIND=VALUE, got {text!r}")
    return key, value


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Build a resume and print it as JSON")
    parser.add_argument("full_name", help="Full name of the person")
    parser.add_argument("--location", default="", help="Place of living")
    parser.add_argument("--homepage", default="", help="Link to a personal homepage")
    parser.add_argument("--contact", action="append", type=_split_pair, default=[], help="Contact as KIND=VALUE")
    parser.add_argument("--objective", default=None, help="Text for the objective section")
    parser.add_argument("--achievement", action="append", default=[], help="Achievement list item")
    parser.add_argument("--output", type=Path, default=None, help="Optional path to save the JSON output")
    args = parser.parse_args(argv)

    resume = Resume.of(args.full_name, args.location, args.homepage)
    for key, value in args.contact:
        resume.add_contact(ContactKind.from_key(key), value)
    if args.objective:
        resume.add_section(SectionKind.OBJECTIVE, TextSection(args.objective))
    if args.achievement:
        resume.add_section(SectionKind.ACHIEVEMENT, ListSection(args.achievement))

    json_payload = resume_to_json(resume, SerializationConfig(indent=2))
    print(json_payload)

    if args.output:
        args.output.write_text(json_payload)
        logging.info("Saved output to %s", args.output)


if __name__ == "__main__":
    main()
