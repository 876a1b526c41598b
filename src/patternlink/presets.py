"""Built-in rule presets for common issue trackers and sites."""

from typing import Any

from .rules import Rule


PRESET_RULES: dict[str, dict[str, Any]] = {
    "jira": {
        "name": "JIRA Issues",
        "domain_pattern": "*.atlassian.net",
        "path_pattern": r"\/.*\/([A-Z][A-Z0-9]*-\d+)",
        "output_template": "[${1}](${url})",
        "description": "Formats JIRA issue links to show issue key (e.g., DEV-123)",
    },
    "jira_self_hosted": {
        "name": "JIRA (Self-Hosted)",
        "domain_pattern": "jira.example.com",
        "path_pattern": r"\/.*\/([A-Z][A-Z0-9]*-\d+)",
        "output_template": "[${1}](${url})",
        "description": "For self-hosted JIRA instances. Update the domain pattern to match your server.",
    },
    "confluence": {
        "name": "Confluence Pages",
        "domain_pattern": "*.atlassian.net",
        "path_pattern": r"\/wiki\/spaces\/[^\/]+\/pages\/\d+\/([^?]+)",
        "output_template": "[${1}](${url})",
        "description": "Formats Confluence links to show page title from URL",
    },
    "confluence_self_hosted": {
        "name": "Confluence (Self-Hosted)",
        "domain_pattern": "confluence.example.com",
        "path_pattern": r"\/wiki\/spaces\/[^\/]+\/pages\/\d+\/([^?]+)",
        "output_template": "[${1}](${url})",
        "description": "For self-hosted Confluence instances. Update the domain pattern.",
    },
    "gitlab_issue": {
        "name": "GitLab Issues",
        "domain_pattern": "gitlab.com",
        "path_pattern": r"\/([^\/]+\/[^\/]+)\/-\/issues\/(\d+)",
        "output_template": "[${1}#${2}](${url})",
        "description": "Formats GitLab issue links (e.g., group/project#123)",
    },
    "gitlab_merge_request": {
        "name": "GitLab Merge Requests",
        "domain_pattern": "gitlab.com",
        "path_pattern": r"\/([^\/]+\/[^\/]+)\/-\/merge_requests\/(\d+)",
        "output_template": "[${1}!${2}](${url})",
        "description": "Formats GitLab MR links (e.g., group/project!123)",
    },
    "gitlab_self_hosted": {
        "name": "GitLab (Self-Hosted)",
        "domain_pattern": "gitlab.example.com",
        "path_pattern": r"\/([^\/]+\/[^\/]+)\/-\/(issues|merge_requests)\/(\d+)",
        "output_template": "[${1}#${3}](${url})",
        "description": "For self-hosted GitLab. Update domain pattern. Uses # for both issues and MRs.",
    },
    "github": {
        "name": "GitHub Issues/PRs",
        "domain_pattern": "github.com",
        "path_pattern": r"\/([^\/]+\/[^\/]+)\/(issues|pull)\/(\d+)",
        "output_template": "[${1}#${3}](${url})",
        "description": "Formats GitHub issue and PR links (e.g., owner/repo#123)",
    },
    "bitbucket_pr": {
        "name": "Bitbucket PRs",
        "domain_pattern": "bitbucket.org",
        "path_pattern": r"\/([^\/]+\/[^\/]+)\/pull-requests\/(\d+)",
        "output_template": "[${1}#${2}](${url})",
        "description": "Formats Bitbucket pull request links (e.g., team/repo#123)",
    },
    "bitbucket_issue": {
        "name": "Bitbucket Issues",
        "domain_pattern": "bitbucket.org",
        "path_pattern": r"\/([^\/]+\/[^\/]+)\/issues\/(\d+)",
        "output_template": "[${1}#${2}](${url})",
        "description": "Formats Bitbucket issue links (e.g., team/repo#45)",
    },
    "azure_devops_work_item": {
        "name": "Azure DevOps Work Items",
        "domain_pattern": "dev.azure.com",
        "path_pattern": r"\/[^\/]+\/[^\/]+\/_workitems\/edit\/(\d+)",
        "output_template": "[#${1}](${url})",
        "description": "Formats Azure DevOps work item links (e.g., #1234)",
    },
    "azure_devops_pr": {
        "name": "Azure DevOps PRs",
        "domain_pattern": "dev.azure.com",
        "path_pattern": r"\/[^\/]+\/[^\/]+\/_git\/[^\/]+\/pullrequest\/(\d+)",
        "output_template": "[PR-${1}](${url})",
        "description": "Formats Azure DevOps pull request links (e.g., PR-56)",
    },
    "trello": {
        "name": "Trello Cards",
        "domain_pattern": "trello.com",
        "path_pattern": r"\/c\/[^\/]+\/([^?]+)",
        "output_template": "[${1}](${url})",
        "description": "Formats Trello card links to show card title",
    },
    "linear": {
        "name": "Linear Issues",
        "domain_pattern": "linear.app",
        "path_pattern": r"\/[^\/]+\/issue\/([A-Z]+-\d+)",
        "output_template": "[${1}](${url})",
        "description": "Formats Linear issue links (e.g., TEAM-123)",
    },
    "notion": {
        "name": "Notion Pages",
        "domain_pattern": "notion.so",
        "path_pattern": r"\/([^-]+-[^-]+-[a-f0-9]+)",
        "output_template": "[${1}](${url})",
        "description": "Formats Notion page links to show page title",
    },
    "figma": {
        "name": "Figma Files",
        "domain_pattern": "figma.com",
        "path_pattern": r"\/file\/[^\/]+\/([^?]+)",
        "output_template": "[${1}](${url})",
        "description": "Formats Figma file links to show design name",
    },
    "sentry": {
        "name": "Sentry Issues",
        "domain_pattern": "sentry.io",
        "path_pattern": r"\/organizations\/[^\/]+\/issues\/(\d+)",
        "output_template": "[SENTRY-${1}](${url})",
        "description": "Formats Sentry issue links (e.g., SENTRY-123)",
    },
    "stackoverflow": {
        "name": "Stack Overflow",
        "domain_pattern": "stackoverflow.com",
        "path_pattern": r"\/questions\/\d+\/([^?]+)",
        "output_template": "[SO: ${1}](${url})",
        "description": "Formats Stack Overflow question links",
    },
    "npm": {
        "name": "npm Packages",
        "domain_pattern": "npmjs.com",
        "path_pattern": r"\/package\/([^?]+)",
        "output_template": "[npm: ${1}](${url})",
        "description": "Formats npm package links (e.g., npm: lodash)",
    },
}


def get_preset_keys() -> list[str]:
    """Return all preset keys in definition order."""
    return list(PRESET_RULES)


def create_rule_from_preset(key: str, **overrides: Any) -> Rule:
    """Create an enabled Rule from a preset.

    Args:
        key: Preset key (see get_preset_keys())
        **overrides: Rule fields to override, e.g. domain_pattern

    Raises:
        KeyError: If the preset key is unknown
    """
    preset = PRESET_RULES.get(key)
    if preset is None:
        raise KeyError(f"Unknown preset: {key}")
    fields = {**preset, "enabled": True, "is_preset": True, **overrides}
    return Rule(**fields)
