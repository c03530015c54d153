"""
Unit tests for JD section parsing and classification.
"""

import unittest

from pydantic import ValidationError

from ats_keywords.models import SectionType
from ats_keywords.sections import classify_section, clean_header, is_section_header, parse_jd_sections


STRUCTURED_JD = """Acme Corp

Responsibilities:
- Build APIs
- Lead reviews

Requirements:
- 5+ years Python

Benefits:
- Remote
"""

UNSTRUCTURED_JD = (
    "We are building the future of payments.\n"
    "You will design APIs and services.\n"
    "Must have 5 years of Go.\n"
    "Bonus points for Rust."
)


class TestHeaderDetection(unittest.TestCase):

    def test_header_styles(self):
        self.assertTrue(is_section_header("## About Us"))
        self.assertTrue(is_section_header("**Requirements**"))
        self.assertTrue(is_section_header("REQUIREMENTS"))
        self.assertTrue(is_section_header("WHAT YOU'LL DO:"))
        self.assertTrue(is_section_header("Nice to Have:"))

    def test_non_headers(self):
        self.assertFalse(is_section_header(""))
        self.assertFalse(is_section_header("   "))
        self.assertFalse(is_section_header("We build great things."))
        self.assertFalse(is_section_header("- Tools we use:"))
        self.assertFalse(is_section_header("ABC"))

    def test_clean_header(self):
        self.assertEqual(clean_header("## Requirements:"), "Requirements")
        self.assertEqual(clean_header("**Nice to Have:**"), "Nice to Have")
        self.assertEqual(clean_header("  Benefits:  "), "Benefits")


class TestClassifySection(unittest.TestCase):

    def test_preferred_qualifications_is_nice_to_have(self):
        self.assertEqual(classify_section("Preferred Qualifications"), SectionType.NICE_TO_HAVE)

    def test_required_markers(self):
        self.assertEqual(classify_section("Minimum Qualifications"), SectionType.REQUIRED)
        self.assertEqual(classify_section("Must Have"), SectionType.REQUIRED)

    def test_responsibilities_markers(self):
        self.assertEqual(classify_section("What you'll do"), SectionType.RESPONSIBILITIES)
        self.assertEqual(classify_section("About the Role"), SectionType.RESPONSIBILITIES)

    def test_about_and_unknown(self):
        self.assertEqual(classify_section("Benefits"), SectionType.ABOUT)
        self.assertEqual(classify_section("Location"), SectionType.UNKNOWN)


class TestParseSections(unittest.TestCase):

    def test_header_based_parsing(self):
        sections = parse_jd_sections(STRUCTURED_JD)
        self.assertEqual(
            [section.section_type for section in sections],
            [SectionType.RESPONSIBILITIES, SectionType.REQUIRED, SectionType.ABOUT],
        )
        self.assertEqual(sections[0].header, "Responsibilities")
        self.assertEqual(sections[0].content, "- Build APIs\n- Lead reviews")
        self.assertEqual(sections[1].content, "- 5+ years Python")
        self.assertEqual(sections[2].content, "- Remote")

    def test_inline_marker_fallback(self):
        sections = parse_jd_sections(UNSTRUCTURED_JD)
        self.assertEqual(
            [section.section_type for section in sections],
            [
                SectionType.UNKNOWN,
                SectionType.RESPONSIBILITIES,
                SectionType.REQUIRED,
                SectionType.NICE_TO_HAVE,
            ],
        )
        self.assertEqual(sections[2].content, "Must have 5 years of Go.")
        self.assertTrue(all(section.header == "" for section in sections))

    def test_empty_jd_is_one_unknown_section(self):
        sections = parse_jd_sections("")
        self.assertEqual(len(sections), 1)
        self.assertEqual(sections[0].section_type, SectionType.UNKNOWN)
        self.assertEqual(sections[0].content, "")

    def test_sections_are_immutable(self):
        section = parse_jd_sections(STRUCTURED_JD)[0]
        with self.assertRaises(ValidationError):
            section.content = "changed"


if __name__ == "__main__":
    unittest.main()
