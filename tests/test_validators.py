"""Tests for author-time rule validation."""

import sys

import pytest

from patternlink.presets import create_rule_from_preset, get_preset_keys
from patternlink.rules import Rule
from patternlink.validators import (
    sanitize_domain,
    validate_pattern,
    validate_rule,
    validate_template,
)


class TestSanitizeDomain:
    """Tests for sanitize_domain()."""

    def test_empty_string(self):
        assert sanitize_domain("") == ""

    def test_removes_illegal_characters(self):
        assert sanitize_domain("!@#$%^&()domain.com") == "domain.com"

    def test_keeps_wildcards(self):
        assert sanitize_domain("*.example.domain.com") == "*.example.domain.com"

    def test_keeps_path_prefix(self):
        assert sanitize_domain("example.com/jira") == "example.com/jira"

    def test_strips_whitespace_and_scheme_colon(self):
        assert sanitize_domain(" https://my-host.com ") == "https//my-host.com"


class TestValidatePattern:
    """Tests for validate_pattern()."""

    @pytest.mark.parametrize(
        "pattern",
        [r"\d+", r"([A-Z]+-\d+)", r"\/browse\/([A-Z]+-\d+)"],
    )
    def test_valid_patterns(self, pattern):
        assert validate_pattern(pattern) is None

    @pytest.mark.parametrize("pattern", ["", "   "])
    def test_empty_pattern(self, pattern):
        assert validate_pattern(pattern) == "Pattern cannot be empty"

    @pytest.mark.parametrize("pattern", ["[", "(unclosed"])
    def test_invalid_patterns(self, pattern):
        message = validate_pattern(pattern)
        assert message is not None
        assert message

    @pytest.mark.skipif(sys.version_info < (3, 11), reason="global flags mid-pattern are an error from 3.11")
    def test_global_inline_flag_rejected(self):
        """A leading (?i) cannot be used once placed after the domain prefix."""
        assert validate_pattern(r"(?i)\/page\/(\d+)") is not None

    def test_scoped_inline_flag_accepted(self):
        assert validate_pattern(r"\/page\/(?i:[a-z]+)") is None


class TestValidateTemplate:
    """Tests for validate_template()."""

    def test_url_placeholder(self):
        assert validate_template("[Link](${url})") is None

    def test_capture_placeholders(self):
        assert validate_template("[${1}](${url})") is None
        assert validate_template("[${1}]") is None

    def test_empty_template(self):
        assert validate_template("") == "Template cannot be empty"
        assert validate_template("  ") == "Template cannot be empty"

    def test_static_template_rejected(self):
        assert validate_template("[static text]") is not None

    def test_domain_alone_rejected(self):
        """${domain} is not a dynamic value on its own."""
        assert validate_template("[${domain}]") is not None


class TestValidateRule:
    """Tests for validate_rule()."""

    @pytest.mark.parametrize("key", get_preset_keys())
    def test_presets_are_valid(self, key):
        assert validate_rule(create_rule_from_preset(key)) == []

    def test_collects_every_problem(self):
        rule = Rule(name=" ", domain_pattern="", path_pattern="(", output_template="static")
        problems = validate_rule(rule)
        assert len(problems) == 4
        assert problems[0] == "Name cannot be empty"
        assert problems[1] == "Domain pattern cannot be empty"
        assert problems[2].startswith("Path pattern: ")
        assert problems[3].startswith("Output template: ")
