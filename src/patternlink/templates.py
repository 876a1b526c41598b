"""Capture decoding and output template rendering for patternlink."""

import re
from urllib.parse import unquote


# Recognized placeholders: ${url}, ${domain}, ${1} .. ${9}
PLACEHOLDER_PATTERN = re.compile(r"\$\{(url|domain|[1-9])\}")

# A '%' that does not start a two-digit hex escape
MALFORMED_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def decode_value(value: str) -> str:
    """Decode a URL-encoded capture for display.

    '+' becomes a space, then %XX escapes are decoded
    ("Hello+World" and "Hello%20World" both give "Hello World").
    Malformed escapes fall back to the '+' replacement only.
    """
    with_spaces = value.replace("+", " ")
    if MALFORMED_ESCAPE.search(with_spaces):
        return with_spaces
    try:
        return unquote(with_spaces, errors="strict")
    except UnicodeDecodeError:
        return with_spaces


def render_template(
    template: str,
    url: str,
    domain: str,
    captures: tuple[str, ...] | list[str],
) -> str:
    """Render an output template.

    Supported placeholders:
    - ${url} - The full original URL
    - ${domain} - The matched domain, without protocol
    - ${1} .. ${9} - Capture groups; missing groups render as ""

    Substitution is a single pass, so placeholder-like text inside the
    substituted values is left alone.

    Args:
        template: Output template string
        url: Full URL
        domain: Matched domain
        captures: Decoded capture values, index 0 is ${1}

    Returns:
        Rendered output string
    """

    def replace(match: re.Match[str]) -> str:
        key = match.group(1)
        if key == "url":
            return url
        if key == "domain":
            return domain
        index = int(key) - 1
        return captures[index] if index < len(captures) else ""

    return PLACEHOLDER_PATTERN.sub(replace, template)
