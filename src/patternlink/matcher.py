"""Domain and rule matching for patternlink.

A rule matches a URL when its domain pattern prefixes the scheme-stripped
URL and its path pattern consumes the rest of it (an optional query string
is always allowed at the end).
"""

import re
from typing import NamedTuple

from .rules import Rule


SCHEME_PATTERN = r"https?://"
WILDCARD = "*"

# Appended after the path pattern; non-capturing so user groups stay 1..K
QUERY_SUFFIX = r"(?:\?.*)?"


class RuleMatch(NamedTuple):
    """Result of matching a URL against a rule."""

    url: str
    domain: str
    captures: tuple[str, ...]


def domain_to_regex(domain_pattern: str) -> str:
    """Convert a wildcard domain pattern to a regex fragment.

    Literal text is escaped first, then each '*' becomes '.*', so
    'example.com/jira' matches literally and '*.atlassian.net' matches any
    subdomain.
    """
    return ".*".join(re.escape(part) for part in domain_pattern.split(WILDCARD))


def matches_domain(url: str, domain_pattern: str) -> bool:
    """Check if an http(s) URL starts with the domain pattern after '://'.

    The match is anchored at the start only, so the pattern may include a
    path prefix. An empty pattern never matches.
    """
    if not domain_pattern:
        return False
    regex = f"^{SCHEME_PATTERN}{domain_to_regex(domain_pattern)}"
    return re.match(regex, url) is not None


def build_rule_regex(domain_regex: str, path_pattern: str) -> re.Pattern[str]:
    """Compile the full URL pattern for a rule.

    Group 1 is the scheme and domain; the path pattern's own groups follow.

    Raises:
        re.error: If the composed pattern does not compile
    """
    return re.compile(
        f"^({SCHEME_PATTERN}{domain_regex}){path_pattern}{QUERY_SUFFIX}\\Z"
    )


def match_rule(url: str, rule: Rule) -> RuleMatch | None:
    """Match a URL against a single rule.

    Args:
        url: The candidate URL
        rule: Rule to test

    Returns:
        RuleMatch with the URL, the matched domain (scheme stripped) and the
        raw path pattern captures, or None if the rule does not match.
        A path pattern that fails to compile counts as no match.
    """
    if not rule.enabled:
        return None
    if not rule.domain_pattern or not rule.path_pattern:
        return None

    # Fast path: reject on domain before compiling the full pattern
    if not matches_domain(url, rule.domain_pattern):
        return None

    try:
        full_regex = build_rule_regex(domain_to_regex(rule.domain_pattern), rule.path_pattern)
    except re.error:
        return None

    match = full_regex.match(url)
    if match is None:
        return None

    domain = re.sub(f"^{SCHEME_PATTERN}", "", match.group(1))
    captures = tuple(value or "" for value in match.groups()[1:])
    return RuleMatch(url=url, domain=domain, captures=captures)
