"""Section segmentation of normalized RFP text."""

from enum import Enum

from smartrfp.analysis.rules import (
    CANONICAL_SECTION_NAMES,
    FALLBACK_SECTION_TITLE,
    GENERAL_SECTION_TITLE,
    LINES_PER_PAGE,
    MAX_HEADER_LENGTH,
    SECTION_HEADER_PATTERNS,
)
from smartrfp.models.analysis import RFPSection


class _State(Enum):
    NO_SECTION = "no_section"
    IN_SECTION = "in_section"


def match_section_header(line: str) -> str | None:
    """Return the section title if ``line`` looks like a header.

    Args:
        line: A single stripped line of normalized text.

    Returns:
        The header title, or None for body text.
    """
    line = line.strip()
    if not line or line.endswith("?"):
        return None

    for pattern in SECTION_HEADER_PATTERNS:
        if pattern.match(line):
            return line

    if len(line) < MAX_HEADER_LENGTH and not line.endswith("."):
        lower_line = line.lower()
        if any(name in lower_line for name in CANONICAL_SECTION_NAMES):
            return line

    return None


def estimate_page(line_index: int) -> int:
    """Rough page number for a line; indicative only."""
    return line_index // LINES_PER_PAGE + 1


class SectionExtractor:
    """Line-oriented state machine that partitions text into sections."""

    def extract(self, text: str) -> list[RFPSection]:
        """Split normalized text into sections.

        Lines preceding the first header form a "General Information"
        section. A header with no body lines is dropped. When nothing is
        produced the whole text becomes a single fallback section.

        Args:
            text: Normalized RFP text.

        Returns:
            Ordered list of sections without questions.
        """
        sections: list[RFPSection] = []
        state = _State.NO_SECTION
        current: RFPSection | None = None
        buffer: list[str] = []

        for index, raw_line in enumerate(text.split("\n")):
            line = raw_line.strip()
            title = match_section_header(line)

            if title is not None:
                if state is _State.IN_SECTION:
                    self._close(current, buffer, sections)
                current = RFPSection(
                    id=f"section-{len(sections) + 1}",
                    title=title,
                    page_numbers=[estimate_page(index)],
                )
                buffer = []
                state = _State.IN_SECTION
            elif state is _State.IN_SECTION:
                buffer.append(line)
            else:
                current = RFPSection(
                    id="section-general",
                    title=GENERAL_SECTION_TITLE,
                    page_numbers=[1],
                )
                buffer = [line]
                state = _State.IN_SECTION

        if state is _State.IN_SECTION:
            self._close(current, buffer, sections)

        if not sections:
            sections.append(
                RFPSection(
                    id="section-all",
                    title=FALLBACK_SECTION_TITLE,
                    content=text,
                    page_numbers=[1],
                )
            )

        return sections

    @staticmethod
    def _close(
        section: RFPSection | None, buffer: list[str], sections: list[RFPSection]
    ) -> None:
        if section is None or not buffer:
            return
        section.content = "\n".join(buffer).strip()
        sections.append(section)
