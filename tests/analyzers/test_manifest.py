"""Tests for package.json discovery and dependency merging."""

from __future__ import annotations

import json
import logging

from docwriter.analyzers.manifest import find_manifest, load_manifest, merge_dependencies


def test_dev_dependencies_override_runtime_versions() -> None:
    merged = merge_dependencies({"a": "1.0"}, {"a": "2.0", "b": "1.0"})

    assert merged == {"a": "2.0", "b": "1.0"}


def test_merge_keeps_keys_unique_to_either_side() -> None:
    merged = merge_dependencies({"express": "^4.18.2"}, {"jest": "^29.0.0"})

    assert merged == {"express": "^4.18.2", "jest": "^29.0.0"}


def test_merge_ignores_missing_or_malformed_groups() -> None:
    assert merge_dependencies(None, None) == {}
    assert merge_dependencies(["not", "a", "mapping"], {"b": "1"}) == {"b": "1"}


def test_find_manifest_is_case_insensitive(record) -> None:
    records = [record("src/package.json", "{}"), record("Package.JSON", "{}")]

    found = find_manifest(records)

    assert found is not None
    assert found.relative_path == "Package.JSON"


def test_load_manifest_returns_raw_object_and_dependencies(record) -> None:
    payload = {
        "name": "shop",
        "dependencies": {"express": "^4.18.2", "lodash": "4.17.21"},
        "devDependencies": {"lodash": "4.17.20", "jest": "^29.0.0"},
    }

    info = load_manifest([record("package.json", json.dumps(payload))])

    assert info is not None
    assert info.raw == payload
    assert info.dependencies == {
        "express": "^4.18.2",
        "lodash": "4.17.20",
        "jest": "^29.0.0",
    }


def test_malformed_manifest_logs_warning_and_is_absent(record, caplog, monkeypatch) -> None:
    monkeypatch.setattr(logging.getLogger("docwriter"), "propagate", True)
    caplog.set_level(logging.WARNING, logger="docwriter")

    info = load_manifest([record("package.json", "{not json")])

    assert info is None
    assert any("Failed to parse package.json" in message for message in caplog.messages)


def test_non_object_manifest_is_absent(record) -> None:
    assert load_manifest([record("package.json", "[1, 2]")]) is None


def test_missing_manifest_returns_none(record) -> None:
    assert load_manifest([record("index.js", "")]) is None
