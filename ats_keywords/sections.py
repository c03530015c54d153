"""
JD Section Parser

Splits a job description into labelled sections. Pass one finds header
lines; pass two slices the text between consecutive headers and classifies
each header. JDs without recognisable headers go through an inline-marker
fallback instead.
"""

import logging
from typing import List, Optional, Sequence, Tuple

from .config import MAX_HEADER_LENGTH
from .models import ParsedSection, SectionType
from .reference_data import (
    ALL_CAPS_HEADER_PATTERN,
    BOLD_EDGE_PATTERN,
    BOLD_LINE_PATTERN,
    BULLET_PREFIX_PATTERN,
    MARKDOWN_HEADING_PATTERN,
    TRAILING_COLON_PATTERN,
    WORD_COLON_HEADER_PATTERN,
    ReferenceData,
    get_reference_data,
)

logger = logging.getLogger(__name__)


def is_section_header(line: str) -> bool:
    """Return True if a line looks like a section header."""
    trimmed = line.strip()
    if not trimmed:
        return False
    if MARKDOWN_HEADING_PATTERN.match(trimmed):
        return True
    if BOLD_LINE_PATTERN.match(trimmed):
        return True
    if ALL_CAPS_HEADER_PATTERN.match(trimmed) and len(trimmed) < MAX_HEADER_LENGTH:
        return True
    if WORD_COLON_HEADER_PATTERN.match(trimmed) and len(trimmed) < MAX_HEADER_LENGTH:
        return True
    if (
        trimmed.endswith(":")
        and len(trimmed) < MAX_HEADER_LENGTH
        and not BULLET_PREFIX_PATTERN.match(trimmed)
    ):
        return True
    return False


def clean_header(line: str) -> str:
    """Strip markdown/bold decoration and the trailing colon from a header line."""
    header = MARKDOWN_HEADING_PATTERN.sub("", line.strip(), count=1)
    header = BOLD_EDGE_PATTERN.sub("", header)
    header = TRAILING_COLON_PATTERN.sub("", header)
    return header.strip()


def _detect_marker(
    lower: str, reference: ReferenceData, include_about: bool
) -> Optional[SectionType]:
    # Nice-to-have first: "preferred qualifications" must not read as required.
    checks: List[Tuple[SectionType, Sequence[str]]] = [
        (SectionType.NICE_TO_HAVE, reference.nice_to_have_markers),
        (SectionType.REQUIRED, reference.required_markers),
        (SectionType.RESPONSIBILITIES, reference.responsibilities_markers),
    ]
    if include_about:
        checks.append((SectionType.ABOUT, reference.about_markers))

    for section_type, markers in checks:
        if any(marker in lower for marker in markers):
            return section_type
    return None


def classify_section(header: str, reference: Optional[ReferenceData] = None) -> SectionType:
    """Map a header label to a section type by marker containment."""
    reference = reference or get_reference_data()
    detected = _detect_marker(header.lower(), reference, include_about=True)
    return detected or SectionType.UNKNOWN


def parse_jd_sections(
    jd: str, reference: Optional[ReferenceData] = None
) -> List[ParsedSection]:
    """
    Split a JD into ordered sections.

    Text above the first header carries no section label and is not returned;
    every header owns the lines up to the next header.
    """
    reference = reference or get_reference_data()
    lines = jd.split("\n")

    header_positions = [
        (index, clean_header(line))
        for index, line in enumerate(lines)
        if is_section_header(line)
    ]

    if not header_positions:
        logger.debug("No section headers found, using inline marker fallback")
        return _fallback_section_parsing(jd, reference)

    sections: List[ParsedSection] = []
    for position, (line_index, header) in enumerate(header_positions):
        end = (
            header_positions[position + 1][0]
            if position + 1 < len(header_positions)
            else len(lines)
        )
        content = "\n".join(lines[line_index + 1:end]).strip()
        sections.append(ParsedSection(
            section_type=classify_section(header, reference),
            header=header,
            content=content,
        ))

    logger.debug(f"Parsed {len(sections)} sections from headers")
    return sections


def _fallback_section_parsing(jd: str, reference: ReferenceData) -> List[ParsedSection]:
    """
    Section JDs that have no header lines by watching for inline marker
    phrases; a new section starts whenever the detected type changes.
    """
    sections: List[ParsedSection] = []
    current_lines: List[str] = []
    current_type = SectionType.UNKNOWN

    for line in jd.split("\n"):
        detected = _detect_marker(line.lower().strip(), reference, include_about=False)

        if detected is not None and detected != current_type:
            if current_lines:
                sections.append(ParsedSection(
                    section_type=current_type,
                    content="\n".join(current_lines).strip(),
                ))
            current_type = detected
            current_lines = [line]
        else:
            current_lines.append(line)

    if current_lines:
        sections.append(ParsedSection(
            section_type=current_type,
            content="\n".join(current_lines).strip(),
        ))

    if not sections:
        sections.append(ParsedSection(section_type=SectionType.UNKNOWN, content=jd.strip()))

    return sections
