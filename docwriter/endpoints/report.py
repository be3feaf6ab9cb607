"""Grouping and Markdown rendering of extracted endpoints."""

from __future__ import annotations

from typing import Dict, List, Mapping, Optional

from ..models import Endpoint

ROOT_GROUP = "root"
REPORT_TITLE = "# API Documentation"


def group_name(path: str) -> str:
    """Return the first non-empty path segment, or ``root``."""
    for segment in path.split("/"):
        if segment:
            return segment
    return ROOT_GROUP


def group_endpoints(endpoints: Mapping[str, Endpoint]) -> Dict[str, List[Endpoint]]:
    """Group endpoints by leading path segment, keeping encounter order."""
    groups: Dict[str, List[Endpoint]] = {}
    for endpoint in endpoints.values():
        groups.setdefault(group_name(endpoint.path), []).append(endpoint)
    return groups


def _render_endpoint(endpoint: Endpoint) -> List[str]:
    lines = [
        f"### {endpoint.key}",
        "",
        f"**Description:** {endpoint.description}",
        "",
    ]
    if endpoint.parameters:
        lines.extend(
            [
                "**Parameters:**",
                "",
                "| Name | Type | Description |",
                "| ---- | ---- | ----------- |",
            ]
        )
        for param in endpoint.parameters:
            lines.append(f"| {param.name} | {param.type} | {param.description} |")
        lines.append("")

    lines.extend(
        [
            f"**Returns:** {endpoint.returns.type} - {endpoint.returns.description}",
            "",
            "**Example Request:**",
            "",
            "```javascript",
            f"// Example {endpoint.method} request to {endpoint.path}",
            "```",
            "",
            "**Example Response:**",
            "",
            "```json",
            "// Example response",
            "```",
            "",
            "---",
            "",
        ]
    )
    return lines


def render_endpoint_report(endpoints: Mapping[str, Endpoint]) -> Optional[str]:
    """Render the API reference; None when there is nothing to document."""
    if not endpoints:
        return None

    lines: List[str] = [REPORT_TITLE, ""]
    for name, members in group_endpoints(endpoints).items():
        lines.append(f"## {name.upper()} Endpoints")
        lines.append("")
        for endpoint in members:
            lines.extend(_render_endpoint(endpoint))
    return "\n".join(lines)


__all__ = ["ROOT_GROUP", "group_endpoints", "group_name", "render_endpoint_report"]
