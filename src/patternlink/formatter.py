"""Rule evaluation: turn a pasted URL into a formatted link."""

import re

from .matcher import match_rule
from .rules import Rule
from .templates import decode_value, render_template


WHITESPACE = re.compile(r"\s")


def apply_rule(url: str, rule: Rule) -> str | None:
    """Match a URL against one rule and render its output template.

    Returns:
        The formatted output, or None if the rule does not match
    """
    match = match_rule(url, rule)
    if match is None:
        return None
    captures = tuple(decode_value(value) for value in match.captures)
    return render_template(rule.output_template, match.url, match.domain, captures)


def find_match(text: str, rules: list[Rule]) -> tuple[Rule, str] | None:
    """Find the first rule that matches the pasted text.

    Text that is blank or contains any whitespace is not a single URL
    and never matches.

    Returns:
        Tuple of (matching rule, formatted output), or None
    """
    if not isinstance(text, str) or not text.strip():
        return None
    if WHITESPACE.search(text):
        return None

    for rule in rules:
        result = apply_rule(text, rule)
        if result is not None:
            return rule, result
    return None


def format_link(text: str, rules: list[Rule]) -> str | None:
    """Format pasted text with the first matching rule, or None."""
    found = find_match(text, rules)
    if found is None:
        return None
    return found[1]
