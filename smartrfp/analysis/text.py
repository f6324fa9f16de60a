"""Text normalization applied before any extraction."""

import re

_CRLF = re.compile(r"\r\n?")
_BLANK_RUNS = re.compile(r"\n{3,}")
_WHITESPACE_RUNS = re.compile(r"\s{2,}")


def normalize_text(text: str) -> str:
    """Normalize raw RFP text.

    Line endings become ``\\n``, long blank runs shrink to one blank line and
    any run of two or more whitespace characters collapses to a single
    space. The result is trimmed. Original offsets are not preserved.
    """
    text = _CRLF.sub("\n", text)
    text = _BLANK_RUNS.sub("\n\n", text)
    text = _WHITESPACE_RUNS.sub(" ", text)
    return text.strip()
