"""Author-time validation for patternlink rules.

These checks are for editing rules; matching never calls them and
tolerates rules that would fail them.
"""

import re

from .matcher import build_rule_regex
from .rules import Rule


CAPTURE_REFERENCE = re.compile(r"\$\{\d+\}")
URL_PLACEHOLDER = "${url}"

# Characters allowed in domain patterns: letters, digits, '.', '*', '-', '/'
DISALLOWED_DOMAIN_CHARS = re.compile(r"[^a-zA-Z0-9.*\-/]")


def sanitize_domain(domain: str) -> str:
    """Strip characters that do not belong in a domain pattern."""
    return DISALLOWED_DOMAIN_CHARS.sub("", domain)


def validate_pattern(pattern: str) -> str | None:
    """Validate a path pattern.

    Returns:
        None if the pattern is valid, otherwise an error message
    """
    if not pattern or not pattern.strip():
        return "Pattern cannot be empty"
    try:
        re.compile(pattern)
        # Must also compile once embedded after the domain prefix
        build_rule_regex("", pattern)
    except re.error as e:
        return str(e) or "Invalid regex pattern"
    return None


def validate_template(template: str) -> str | None:
    """Validate an output template.

    The template must reference ${url} or at least one capture group.

    Returns:
        None if the template is valid, otherwise an error message
    """
    if not template or not template.strip():
        return "Template cannot be empty"
    if URL_PLACEHOLDER not in template and not CAPTURE_REFERENCE.search(template):
        return "Template must include ${url} or at least one capture group (${1}, ${2}, etc.)"
    return None


def validate_rule(rule: Rule) -> list[str]:
    """Collect validation errors for a whole rule (empty list if valid)."""
    errors: list[str] = []
    if not rule.name.strip():
        errors.append("Name cannot be empty")
    if not rule.domain_pattern.strip():
        errors.append("Domain pattern cannot be empty")
    pattern_error = validate_pattern(rule.path_pattern)
    if pattern_error:
        errors.append(f"Path pattern: {pattern_error}")
    template_error = validate_template(rule.output_template)
    if template_error:
        errors.append(f"Output template: {template_error}")
    return errors
