"""Tests for endpoint grouping and the API reference renderer."""

from __future__ import annotations

from docwriter.endpoints.report import group_endpoints, group_name, render_endpoint_report
from docwriter.models import Endpoint, ParameterDescriptor, ReturnDescriptor


def _endpoint(method: str, path: str, **kwargs) -> Endpoint:
    kwargs.setdefault("description", f"{method} {path}")
    return Endpoint(method=method, path=path, **kwargs)


def _as_map(*endpoints: Endpoint) -> dict[str, Endpoint]:
    return {endpoint.key: endpoint for endpoint in endpoints}


def test_group_name_uses_first_segment() -> None:
    assert group_name("/auth/login") == "auth"
    assert group_name("/") == "root"
    assert group_name("") == "root"


def test_groups_keep_first_encounter_order() -> None:
    endpoints = _as_map(
        _endpoint("GET", "/users"),
        _endpoint("POST", "/auth/login"),
        _endpoint("GET", "/"),
        _endpoint("DELETE", "/users/:id"),
    )

    groups = group_endpoints(endpoints)

    assert list(groups) == ["users", "auth", "root"]
    assert [endpoint.key for endpoint in groups["users"]] == ["GET /users", "DELETE /users/:id"]


def test_empty_map_renders_nothing() -> None:
    assert render_endpoint_report({}) is None


def test_report_renders_parameters_returns_and_placeholders() -> None:
    endpoints = _as_map(
        _endpoint(
            "GET",
            "/users",
            description="Get all users",
            parameters=[ParameterDescriptor(type="number", name="limit", description="max results")],
            returns=ReturnDescriptor(type="Array", description="list of users"),
        )
    )

    report = render_endpoint_report(endpoints)

    assert report is not None
    assert report.startswith("# API Documentation\n\n## USERS Endpoints\n\n### GET /users\n")
    assert "**Description:** Get all users" in report
    assert "| Name | Type | Description |" in report
    assert "| limit | number | max results |" in report
    assert "**Returns:** Array - list of users" in report
    assert "**Example Request:**" in report
    assert "// Example GET request to /users" in report
    assert "**Example Response:**" in report


def test_parameter_table_omitted_without_parameters() -> None:
    report = render_endpoint_report(_as_map(_endpoint("GET", "/")))

    assert report is not None
    assert "## ROOT Endpoints" in report
    assert "**Parameters:**" not in report
    assert "**Returns:** void - No return value" in report
