"""Whitespace normalization for extracted text."""

import re

_HORIZONTAL_WHITESPACE = re.compile(r"[ \t]+")
_BLANK_LINE_RUNS = re.compile(r"\n{3,}")


def normalize(text: str | None) -> str:
    """Collapse whitespace noise in extracted text.

    Steps, in order:
        1. Runs of spaces/tabs become a single space.
        2. Runs of three or more newlines become exactly two.
        3. Each line is stripped of leading/trailing spaces and tabs.
        4. Runs of three or more newlines are collapsed again, since lines
           that held only whitespace are now empty.
        5. The whole result is stripped.

    Never raises, and applying it twice gives the same result as once.

    Args:
        text: Raw extracted text.

    Returns:
        The normalized text, or an empty string for empty input.
    """
    if not text:
        return ""

    text = _HORIZONTAL_WHITESPACE.sub(" ", text)
    text = _BLANK_LINE_RUNS.sub("\n\n", text)
    text = "\n".join(line.strip(" \t") for line in text.split("\n"))
    # Whitespace-only lines are empty now and may form new blank runs
    text = _BLANK_LINE_RUNS.sub("\n\n", text)
    return text.strip()
