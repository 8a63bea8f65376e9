"""Stateless helpers for pulling values out of manga pages.

DOM helpers take the raw page markup and a CSS selector, parse the markup with
BeautifulSoup and look at the first matching element only. Each call parses
the document again so a failure in one lookup can never leave shared state
behind for the next. Text helpers implement the small heuristics site parsers
apply to chapter headings.
"""

import re

from bs4 import BeautifulSoup, Tag

from .errors import AttributeNotFound, ElementNotFound

DIGIT_RUN_RE = re.compile(r"[0-9]+")


def _select_first(html: str, selector: str) -> Tag:
    """Parse markup and return the first element matching selector."""
    soup = BeautifulSoup(html, "lxml")
    element = soup.select_one(selector)
    if element is None:
        raise ElementNotFound(f"no element matches selector '{selector}'")
    return element


def first_matching_text(html: str, selector: str) -> str:
    """Return the trimmed text content of the first element matching selector.

    All descendant text nodes are concatenated in document order without a
    separator before trimming.

    Args:
        html: Raw page markup.
        selector: CSS selector for the target element.

    Returns:
        Text content with leading and trailing whitespace removed.

    Raises:
        ElementNotFound: If no element matches the selector.
    """
    return _select_first(html, selector).get_text().strip()


def first_matching_attribute(html: str, selector: str, attribute: str) -> str:
    """Return the raw value of an attribute on the first matching element.

    The value is returned as written in the markup, relative URLs included.

    Args:
        html: Raw page markup.
        selector: CSS selector for the target element.
        attribute: Attribute name to read (e.g. 'src').

    Returns:
        Attribute value.

    Raises:
        ElementNotFound: If no element matches the selector.
        AttributeNotFound: If the element does not carry the attribute.
    """
    element = _select_first(html, selector)
    value = element.get(attribute)
    if value is None:
        raise AttributeNotFound(
            f"element matching '{selector}' has no '{attribute}' attribute"
        )
    # Multi-valued attributes such as class come back as lists
    if isinstance(value, list):
        return " ".join(value)
    return value


def first_digit_run(text: str) -> str:
    """Return the leftmost run of consecutive ASCII digits in text.

    Leading non-digits are skipped; the run ends at the first non-digit after
    it. Returns an empty string when text holds no digit at all.

    >>> first_digit_run("Chapter 45.5: Into the Fire")
    '45'
    """
    match = DIGIT_RUN_RE.search(text)
    return match.group(0) if match else ""


def text_after_separator(text: str, separator: str) -> str | None:
    """Return the trimmed text following the first separator occurrence.

    The separator itself is not part of the result.

    Args:
        text: Text to search.
        separator: Separator to split on (e.g. ':').

    Returns:
        Trimmed remainder, or None if the separator is missing or nothing but
        whitespace follows it.
    """
    _, found, remainder = text.partition(separator)
    if not found:
        return None
    remainder = remainder.strip()
    return remainder or None
