"""Command-line interface for patternlink."""

import argparse
import sys
from dataclasses import replace
from pathlib import Path

from rich.markup import escape

from . import __version__
from .clipboard import read_clipboard_text, write_clipboard_text
from .config import Settings, get_config_path, init_config, load_settings, save_settings
from .console import confirm, console, error, info, success, warning
from .formatter import apply_rule, find_match
from .presets import PRESET_RULES, create_rule_from_preset
from .rules import Rule, find_rule, move_rule, remove_rule
from .validators import sanitize_domain, validate_rule


def parse_args(args: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="patternlink",
        description="Shorten a pasted URL into a markdown link using pattern rules.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
Examples:
  patternlink "https://company.atlassian.net/browse/DEV-123"
  patternlink --copy
  patternlink --add-preset github
  patternlink --test github "https://github.com/owner/repo/pull/7"
""",
    )

    # Input
    parser.add_argument(
        "text",
        nargs="?",
        metavar="TEXT",
        help="URL to format (reads clipboard if omitted)",
    )

    parser.add_argument(
        "-c", "--copy",
        action="store_true",
        help="Write the output back to the clipboard",
    )

    # Rule management
    parser.add_argument(
        "--list-rules",
        action="store_true",
        help="List configured rules and exit",
    )

    parser.add_argument(
        "--list-presets",
        action="store_true",
        help="List built-in presets and exit",
    )

    parser.add_argument(
        "--test",
        nargs=2,
        metavar=("RULE", "URL"),
        help="Preview one rule (ID or name) against a URL",
    )

    parser.add_argument(
        "--add-preset",
        metavar="KEY",
        help="Append a rule from a built-in preset",
    )

    parser.add_argument(
        "--add",
        nargs=4,
        metavar=("NAME", "DOMAIN", "PATH", "TEMPLATE"),
        help="Append a custom rule",
    )

    parser.add_argument(
        "--enable",
        metavar="RULE",
        help="Enable a rule",
    )

    parser.add_argument(
        "--disable",
        metavar="RULE",
        help="Disable a rule",
    )

    parser.add_argument(
        "--move-up",
        metavar="RULE",
        help="Move a rule one position earlier",
    )

    parser.add_argument(
        "--move-down",
        metavar="RULE",
        help="Move a rule one position later",
    )

    parser.add_argument(
        "--remove",
        metavar="RULE",
        help="Delete a rule",
    )

    parser.add_argument(
        "--validate",
        action="store_true",
        help="Check every rule's patterns and template",
    )

    parser.add_argument(
        "-y", "--yes",
        action="store_true",
        help="Skip confirmation prompts",
    )

    # Configuration
    parser.add_argument(
        "--init",
        action="store_true",
        help="Create a default config file and exit",
    )

    parser.add_argument(
        "--config",
        metavar="FILE",
        help="Use alternate config file",
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Show detailed output",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return parser.parse_args(args)


def list_rules(rules: list[Rule]) -> None:
    """Print configured rules in evaluation order."""
    if not rules:
        console.print("No rules configured.")
        return

    console.print("[bold]Configured rules (first match wins):[/bold]\n")
    for position, rule in enumerate(rules, start=1):
        state = "" if rule.enabled else " [dim](disabled)[/dim]"
        console.print(f"  {position}. [cyan]{escape(rule.name)}[/cyan]{state}", highlight=False)
        console.print(f"    ID: {rule.id}", highlight=False)
        console.print(f"    Domain: {rule.domain_pattern}", highlight=False, markup=False)
        console.print(f"    Path: {rule.path_pattern}", highlight=False, markup=False)
        console.print(f"    Template: {rule.output_template}", highlight=False, markup=False)
        if rule.description:
            console.print(f"    {rule.description}", highlight=False, markup=False)
        console.print()


def list_presets() -> None:
    """Print built-in presets."""
    console.print("[bold]Built-in presets:[/bold]\n")
    for key, preset in PRESET_RULES.items():
        console.print(f"  [cyan]{key}[/cyan] - {preset['name']}", highlight=False)
        console.print(f"    {preset['description']}", highlight=False, markup=False)


def resolve_rule(rules: list[Rule], key: str) -> tuple[int, Rule] | None:
    """Find a rule by ID or name, reporting an error if missing."""
    found = find_rule(rules, key)
    if found is None:
        error(f"No rule with ID or name '{escape(key)}'")
    return found


def preview_rule(rules: list[Rule], key: str, url: str) -> int:
    """Preview a single rule against a URL, ignoring its enabled state."""
    found = resolve_rule(rules, key)
    if found is None:
        return 1
    _, rule = found

    for problem in validate_rule(rule):
        warning(escape(problem))

    preview = replace(rule, enabled=True)
    result = apply_rule(url.strip(), preview)
    if result is None:
        error("No match - check domain and path pattern")
        return 1
    success(f"Result: [bold]{escape(result)}[/bold]")
    return 0


def validate_all(rules: list[Rule]) -> int:
    """Validate every rule; returns 1 if any rule has problems."""
    failed = 0
    for rule in rules:
        problems = validate_rule(rule)
        if not problems:
            continue
        failed += 1
        error(f"{escape(rule.name)} ({escape(rule.id)})")
        for problem in problems:
            console.print(f"    {problem}", highlight=False, markup=False)

    if failed:
        warning(f"{failed}/{len(rules)} rules have problems")
        return 1
    success(f"All {len(rules)} rules are valid")
    return 0


def edit_rules(settings: Settings, args: argparse.Namespace) -> list[Rule] | None:
    """Apply rule management flags.

    Returns:
        The updated rule list, or None if an edit failed
    """
    rules = list(settings.rules)

    if args.add_preset:
        try:
            rule = create_rule_from_preset(args.add_preset)
        except KeyError:
            error(f"Unknown preset: {escape(args.add_preset)}")
            info("Use --list-presets to see available presets.")
            return None
        rules.append(rule)
        success(f"Added rule: {escape(rule.name)}")

    if args.add:
        name, domain, path_pattern, template = args.add
        rule = Rule(
            name=name,
            domain_pattern=sanitize_domain(domain),
            path_pattern=path_pattern,
            output_template=template,
        )
        problems = validate_rule(rule)
        if problems:
            for problem in problems:
                error(escape(problem))
            return None
        rules.append(rule)
        success(f"Added rule: {escape(rule.name)}")

    for key, enabled in ((args.enable, True), (args.disable, False)):
        if not key:
            continue
        found = resolve_rule(rules, key)
        if found is None:
            return None
        index, rule = found
        rules[index] = replace(rule, enabled=enabled)
        success(f"{'Enabled' if enabled else 'Disabled'} rule: {escape(rule.name)}")

    for key, offset in ((args.move_up, -1), (args.move_down, 1)):
        if not key:
            continue
        found = resolve_rule(rules, key)
        if found is None:
            return None
        index, rule = found
        rules = move_rule(rules, index, offset)
        if rules[index] is rule:
            warning(f"Rule '{escape(rule.name)}' is already at the {'top' if offset < 0 else 'bottom'}")
        else:
            success(f"Moved rule: {escape(rule.name)}")

    if args.remove:
        found = resolve_rule(rules, args.remove)
        if found is None:
            return None
        _, rule = found
        if not args.yes and not confirm(f"Delete rule '{escape(rule.name)}'?"):
            info("Aborted.")
        else:
            rules = remove_rule(rules, rule.id)
            success(f"Removed rule: {escape(rule.name)}")

    return rules


def has_edits(args: argparse.Namespace) -> bool:
    """Check whether any rule management flag was given."""
    return any(
        (args.add_preset, args.add, args.enable, args.disable, args.move_up, args.move_down, args.remove)
    )


def format_text(text: str, rules: list[Rule], args: argparse.Namespace) -> int:
    """Format pasted text and print the output to stdout.

    Unmatched text is printed unchanged so piping behaves like a plain paste.
    """
    found = find_match(text, rules)
    if found is None:
        if args.verbose:
            info("No rule matched; text left unchanged")
        output = text
    else:
        rule, output = found
        if args.verbose:
            info(f"Matched rule: {escape(rule.name)}")

    print(output)

    if args.copy and found is not None:
        if write_clipboard_text(output):
            if args.verbose:
                info("Copied to clipboard")
        else:
            warning("Could not write to clipboard")

    return 0 if found is not None else 1


def main(args: list[str] | None = None) -> int:
    """Main entry point.

    Args:
        args: Command-line arguments (for testing)

    Returns:
        Exit code (0 for success)
    """
    parsed_args = parse_args(args)
    config_path = Path(parsed_args.config).expanduser() if parsed_args.config else None

    if parsed_args.init:
        try:
            created = init_config(config_path)
        except FileExistsError as e:
            error(escape(str(e)))
            return 1
        success(f"Created config file: {escape(str(created))}")
        return 0

    if parsed_args.list_presets:
        list_presets()
        return 0

    # Load configuration (auto-creates if missing)
    try:
        settings, was_created = load_settings(config_path)
        if was_created:
            info(f"Created config file: {escape(str(config_path or get_config_path()))}")
            info("Edit this file or use --add-preset to configure rules.")
    except Exception as e:
        error(f"Error loading config: {escape(str(e))}")
        return 1

    if parsed_args.verbose:
        info(f"Config: {escape(str(config_path or get_config_path()))}")

    if has_edits(parsed_args):
        rules = edit_rules(settings, parsed_args)
        if rules is None:
            return 1
        settings = Settings(version=settings.version, rules=rules)
        try:
            save_settings(settings, config_path)
        except OSError as e:
            error(f"Error saving config: {escape(str(e))}")
            return 1
        return 0

    if parsed_args.list_rules:
        list_rules(settings.rules)
        return 0

    if parsed_args.validate:
        return validate_all(settings.rules)

    if parsed_args.test:
        key, url = parsed_args.test
        return preview_rule(settings.rules, key, url)

    text = parsed_args.text
    if text is None:
        text = read_clipboard_text()
        if not text:
            error("No input provided and clipboard empty. Use -h for help.")
            return 1

    return format_text(text, settings.rules, parsed_args)


if __name__ == "__main__":
    sys.exit(main())
