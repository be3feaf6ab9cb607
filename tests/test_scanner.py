"""Tests for the project scanner."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from docwriter.scanner import ProjectScanner, file_extension


def test_file_extension_rules() -> None:
    assert file_extension("src/app.JS") == "JS"
    assert file_extension("archive.tar.gz") == "gz"
    assert file_extension("Makefile") == ""
    assert file_extension("dir.v2/README") == ""
    assert file_extension("lib\\util.ts") == "ts"


def test_scan_filters_extensions_and_excluded_dirs(project_builder) -> None:
    project_builder.write(
        {
            "src/index.js": "console.log('hi')\n",
            "src/notes.txt": "skip me\n",
            "dist/bundle.js": "minified\n",
            "node_modules/pkg/index.js": "vendored\n",
            "styles/site.scss": "body {}\n",
        }
    )

    records = project_builder.scan()

    assert [record.relative_path for record in records] == ["src/index.js", "styles/site.scss"]
    assert records[0].content == "console.log('hi')\n"
    assert records[1].extension == "scss"


def test_scan_honours_custom_excludes_and_extensions(project_builder) -> None:
    project_builder.write({"dist/app.vue": "<template/>\n", "vendor/lib.js": "x\n"})

    records = ProjectScanner(["vue", "js"]).scan(project_builder.root, exclude=["vendor"])

    assert [record.relative_path for record in records] == ["dist/app.vue"]


def test_unreadable_file_is_skipped(project_builder, caplog, monkeypatch) -> None:
    project_builder.write({"ok.js": "fine\n"})
    (project_builder.root / "bad.js").write_bytes(b"\xff\xfe\xfa")
    monkeypatch.setattr(logging.getLogger("docwriter"), "propagate", True)
    caplog.set_level(logging.WARNING, logger="docwriter")

    records = project_builder.scan()

    assert [record.relative_path for record in records] == ["ok.js"]
    assert any("bad.js" in message for message in caplog.messages)


def test_scan_rejects_missing_root(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        ProjectScanner().scan(tmp_path / "missing")
