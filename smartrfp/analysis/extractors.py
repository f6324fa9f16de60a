"""Whole-document extraction of flat requirement lists."""

from smartrfp.analysis.rules import LIST_EXTRACTION_RULES, ExtractionRule


def extract_matches(text: str, rule: ExtractionRule) -> list[str]:
    """Apply one extraction rule to the whole text.

    Args:
        text: Normalized RFP text.
        rule: Patterns and length band to apply.

    Returns:
        Distinct matches in order of first occurrence.
    """
    found: dict[str, None] = {}
    for pattern in rule.patterns:
        for match in pattern.finditer(text):
            item = match.group(0).strip()
            if rule.min_length < len(item) < rule.max_length:
                found.setdefault(item)
    return list(found)


def extract_requirement_lists(text: str) -> dict[str, list[str]]:
    """Run every flat-list rule over the text.

    The keys match the list field names of ``RFPAnalysis``.
    """
    return {name: extract_matches(text, rule) for name, rule in LIST_EXTRACTION_RULES.items()}
