"""
Comparison report model

Result of checking a conversion against a reference Backlog document.
"""

from dataclasses import dataclass


@dataclass
class ComparisonReport:
    """
    Outcome of comparing converted text with an expected reference

    Attributes:
        matches: True if both texts are identical (after CRLF normalization
                 of the expected text)
        patch: Unified diff from expected to actual; empty when matches
        expected_lines: Line count of the expected text
        actual_lines: Line count of the converted text
    """
    matches: bool
    patch: str
    expected_lines: int
    actual_lines: int
