"""Rule records for patternlink."""

import random
import string
import time
from dataclasses import dataclass, field
from typing import Any


DEFAULT_RULE_NAME = "New Rule"
DEFAULT_OUTPUT_TEMPLATE = "[${1}](${url})"

# camelCase keys used by the persisted format of the original plugin
_CAMEL_KEYS = {
    "domain_pattern": "domainPattern",
    "path_pattern": "pathPattern",
    "output_template": "outputTemplate",
    "is_preset": "isPreset",
}

_ID_ALPHABET = string.digits + string.ascii_lowercase

FALSE_STRINGS = ("false", "no", "0", "off")


def _as_bool(value: Any, default: bool) -> bool:
    """Read a YAML flag, treating quoted "false"/"no"/"0"/"off" as False."""
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() not in FALSE_STRINGS


def generate_rule_id() -> str:
    """Generate a unique rule ID (rule_<millis>_<random>)."""
    millis = int(time.time() * 1000)
    suffix = "".join(random.choices(_ID_ALPHABET, k=9))
    return f"rule_{millis}_{suffix}"


@dataclass
class Rule:
    """A single link shortening rule.

    Rules are evaluated in list order; the first match wins.
    """

    id: str = field(default_factory=generate_rule_id)
    name: str = DEFAULT_RULE_NAME
    enabled: bool = True
    domain_pattern: str = ""
    path_pattern: str = ""
    output_template: str = DEFAULT_OUTPUT_TEMPLATE
    description: str | None = None
    is_preset: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Rule":
        """Create a Rule from a dictionary (snake_case or camelCase keys)."""

        def get(key: str, default: Any) -> Any:
            if key in data:
                return data[key]
            camel = _CAMEL_KEYS.get(key)
            if camel and camel in data:
                return data[camel]
            return default

        return cls(
            id=str(get("id", "") or generate_rule_id()),
            name=str(get("name", None) or DEFAULT_RULE_NAME),
            enabled=_as_bool(get("enabled", None), True),
            domain_pattern=str(get("domain_pattern", "") or ""),
            path_pattern=str(get("path_pattern", "") or ""),
            output_template=str(get("output_template", DEFAULT_OUTPUT_TEMPLATE) or ""),
            description=get("description", None) or None,
            is_preset=_as_bool(get("is_preset", None), False),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a plain dictionary for the settings file."""
        data: dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "enabled": self.enabled,
            "domain_pattern": self.domain_pattern,
            "path_pattern": self.path_pattern,
            "output_template": self.output_template,
        }
        if self.description is not None:
            data["description"] = self.description
        if self.is_preset:
            data["is_preset"] = True
        return data


def find_rule(rules: list[Rule], key: str) -> tuple[int, Rule] | None:
    """Find a rule by ID, falling back to a case-insensitive name match.

    Returns:
        Tuple of (index, rule), or None if no rule matches
    """
    for index, rule in enumerate(rules):
        if rule.id == key:
            return index, rule
    lowered = key.lower()
    for index, rule in enumerate(rules):
        if rule.name.lower() == lowered:
            return index, rule
    return None


def move_rule(rules: list[Rule], index: int, offset: int) -> list[Rule]:
    """Swap the rule at index with its neighbour at index + offset.

    Returns a new list; moves past either end leave the order unchanged.
    """
    result = list(rules)
    target = index + offset
    if not (0 <= index < len(result) and 0 <= target < len(result)):
        return result
    result[index], result[target] = result[target], result[index]
    return result


def remove_rule(rules: list[Rule], rule_id: str) -> list[Rule]:
    """Return a new list without the rule that has rule_id."""
    return [rule for rule in rules if rule.id != rule_id]
