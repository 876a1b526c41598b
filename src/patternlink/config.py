"""Settings loading, migration and saving for patternlink."""

import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from .presets import create_rule_from_preset
from .rules import Rule


SETTINGS_VERSION = 2

# Legacy (v1) settings held a single JIRA domain and nothing else
LEGACY_DOMAIN_KEYS = ("supported_domain", "supportedDomain")
LEGACY_PRESET = "jira"

CONFIG_HEADER = """\
# patternlink configuration
# Location: ~/.patternlink.yml
#
# Rules are checked in order; first match wins.
# domain_pattern: domain with * wildcards, may include a path prefix
#                 (e.g. "*.atlassian.net", "example.com/jira")
# path_pattern:   regex matched against the rest of the URL; use () to capture
# output_template: ${url}, ${domain} and ${1} .. ${9} are replaced
#
"""


@dataclass
class Settings:
    """Persisted patternlink settings."""

    version: int = SETTINGS_VERSION
    rules: list[Rule] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Serialize settings for the YAML file."""
        return {
            "version": self.version,
            "rules": [rule.to_dict() for rule in self.rules],
        }


def default_settings() -> Settings:
    """Return default settings: a single JIRA rule."""
    return Settings(rules=[create_rule_from_preset("jira")])


def get_config_path() -> Path:
    """Return the default config file path (~/.patternlink.yml)."""
    return Path.home() / ".patternlink.yml"


def migrate_settings(raw: Any) -> Settings:
    """Build Settings from raw file data, upgrading legacy layouts.

    - A mapping with a 'rules' (or 'patterns') list is read as version 2.
    - A legacy mapping with only a supported domain becomes one rule built
      from the JIRA preset for that domain.
    - Anything else yields the defaults.
    """
    if not isinstance(raw, dict):
        return default_settings()

    rule_dicts = raw.get("rules", raw.get("patterns"))
    if isinstance(rule_dicts, list):
        rules = [Rule.from_dict(item) for item in rule_dicts if isinstance(item, dict)]
        return Settings(version=SETTINGS_VERSION, rules=rules)

    for key in LEGACY_DOMAIN_KEYS:
        domain = raw.get(key)
        if isinstance(domain, str) and domain.strip():
            rule = create_rule_from_preset(LEGACY_PRESET, domain_pattern=domain.strip())
            return Settings(version=SETTINGS_VERSION, rules=[rule])

    return default_settings()


def dump_settings(settings: Settings) -> str:
    """Render settings as commented YAML."""
    body = yaml.safe_dump(
        settings.to_dict(),
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
    )
    return CONFIG_HEADER + body


def save_settings(settings: Settings, path: Path | None = None) -> Path:
    """Write settings to the config file atomically.

    Uses a temporary file and rename so a failed write never leaves a
    truncated config behind.

    Returns:
        The path written
    """
    config_path = path or get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    fd, temp_path = tempfile.mkstemp(
        suffix=".yml.tmp",
        prefix=".patternlink_",
        dir=config_path.parent,
    )
    temp_file = Path(temp_path)

    try:
        with open(fd, "w", encoding="utf-8") as f:
            f.write(dump_settings(settings))
        temp_file.replace(config_path)
    except Exception:
        if temp_file.exists():
            temp_file.unlink()
        raise
    return config_path


def init_config(path: Path | None = None) -> Path:
    """Initialize default config file. Returns the path to the created file."""
    config_path = path or get_config_path()
    if config_path.exists():
        raise FileExistsError(f"Config file already exists: {config_path}")
    return save_settings(default_settings(), config_path)


def load_settings(path: Path | None = None) -> tuple[Settings, bool]:
    """Load settings from file, auto-creating if missing.

    Args:
        path: Optional path to config file. Uses ~/.patternlink.yml if not specified.

    Returns:
        Tuple of (Settings, was_created flag). was_created is True if
        config file was auto-created on this call.

    Raises:
        ValueError: If the file is not valid YAML
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        settings = default_settings()
        save_settings(settings, config_path)
        return settings, True

    try:
        with open(config_path, encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in config file {config_path}: {e}") from e

    return migrate_settings(raw), False
