"""Tests for section segmentation."""

import pytest

from smartrfp.analysis.sections import SectionExtractor, estimate_page, match_section_header


class TestMatchSectionHeader:
    """Tests for header recognition on single lines."""

    @pytest.mark.parametrize(
        "line",
        [
            "SECTION 1: Scope of Work",
            "Part II - Instructions",
            "Chapter 3",
            "1. Technical Requirements",
            "12 Project Management Approach",
            "A. General Conditions",
            "B Vendor Qualifications",
            "Evaluation Criteria",
            "Pricing",
        ],
    )
    def test_headers(self, line):
        """Test recognised header shapes."""
        assert match_section_header(line) == line

    @pytest.mark.parametrize(
        "line",
        [
            "",
            "1. What is your pricing model?",
            "The vendor must provide pricing for each phase.",
            "plain body text without any markers",
            "1. lowercase title here",
        ],
    )
    def test_body_lines(self, line):
        """Test body text is not taken for a header."""
        assert match_section_header(line) is None

    def test_long_line_with_canonical_name(self):
        """Test long lines are not headers through the vocabulary."""
        line = "timeline " + "x" * 120
        assert match_section_header(line) is None

    def test_short_line_with_canonical_name(self):
        """Test short unpunctuated lines naming a section become headers."""
        line = "The vendor must provide pricing for each phase"
        assert match_section_header(line) == line


class TestEstimatePage:
    """Tests for the page estimate."""

    def test_fifty_lines_per_page(self):
        """Test page boundaries every fifty lines."""
        assert estimate_page(0) == 1
        assert estimate_page(49) == 1
        assert estimate_page(50) == 2
        assert estimate_page(120) == 3


class TestSectionExtractor:
    """Tests for SectionExtractor."""

    @pytest.fixture
    def extractor(self):
        """Create extractor."""
        return SectionExtractor()

    def test_sections_in_order(self, extractor, sample_rfp_text):
        """Test header lines open sections in document order."""
        sections = extractor.extract(sample_rfp_text)

        assert [s.title for s in sections] == [
            "General Information",
            "1. Technical Requirements",
            "2. Commercial Terms",
            "3. Vendor Experience",
        ]
        assert sections[0].id == "section-general"

    def test_section_ids_unique(self, extractor, sample_rfp_text):
        """Test section ids do not repeat."""
        sections = extractor.extract(sample_rfp_text)
        ids = [s.id for s in sections]
        assert len(ids) == len(set(ids))

    def test_section_content(self, extractor, sample_rfp_text):
        """Test body lines land in their section."""
        sections = extractor.extract(sample_rfp_text)

        assert sections[2].content == (
            "What is your total cost and payment schedule?\n"
            "Proposals must include a fixed price quote."
        )

    def test_partitioning(self, extractor, sample_rfp_text):
        """Test section contents rebuild the input minus header lines."""
        sections = extractor.extract(sample_rfp_text)
        titles = {s.title for s in sections}

        body_lines = [line for line in sample_rfp_text.split("\n") if line not in titles]
        rebuilt = [line for s in sections for line in s.content.split("\n")]

        assert rebuilt == body_lines

    def test_no_headers(self, extractor):
        """Test text without headers becomes one section."""
        text = "We need a new website.\nWho will host it?"
        sections = extractor.extract(text)

        assert len(sections) == 1
        assert sections[0].content == text

    def test_empty_text(self, extractor):
        """Test empty text still yields one section."""
        sections = extractor.extract("")

        assert len(sections) == 1
        assert sections[0].content == ""

    def test_header_without_body_dropped(self, extractor):
        """Test a header directly followed by another header is skipped."""
        text = "1. Project Overview\n2. Scope of Work\nBuild the portal end to end."
        sections = extractor.extract(text)

        assert [s.title for s in sections] == ["2. Scope of Work"]

    def test_only_header(self, extractor):
        """Test a lone header falls back to the whole document."""
        sections = extractor.extract("Executive Summary")

        assert len(sections) == 1
        assert sections[0].title == "Complete RFP Document"
        assert sections[0].id == "section-all"

    def test_page_numbers(self, extractor):
        """Test headers record an estimated page."""
        filler = "\n".join(f"filler line {i}" for i in range(60))
        text = f"{filler}\nSECTION 2: Deliverables\nShip the product."
        sections = extractor.extract(text)

        assert sections[-1].page_numbers == [2]
