"""Tests for the narrative prompt builder."""

from __future__ import annotations

from pathlib import Path

from docwriter.models import DirectoryNode, ProjectAnalysis
from docwriter.prompting.builder import PromptBuilder


def _analysis(**overrides) -> ProjectAnalysis:
    values = dict(
        project_name="shop",
        project_path="/work/shop",
        file_count=5,
        languages={"js": 4, "md": 1},
        structure=DirectoryNode(),
    )
    values.update(overrides)
    return ProjectAnalysis(**values)


def test_prompt_includes_project_facts() -> None:
    prompt = PromptBuilder().build(
        _analysis(
            dependencies={"express": "4", "jest": "29"},
            package_info={"name": "shop"},
            readme="Shop service readme",
        )
    )

    assert 'a project named "shop"' in prompt
    assert "- Total Files: 5" in prompt
    assert "- Languages Used: js (4 files), md (1 files)" in prompt
    assert "- Dependencies: express, jest" in prompt
    assert '"name": "shop"' in prompt
    assert "Shop service readme" in prompt
    assert "1. Project Overview" in prompt
    assert "6. Development Guide" in prompt


def test_prompt_placeholders_when_facts_missing() -> None:
    prompt = PromptBuilder().build(_analysis())

    assert "- Dependencies: None detected" in prompt
    assert "No package.json found" in prompt
    assert "No README found" in prompt


def test_custom_outline_and_template_directory(tmp_path: Path) -> None:
    (tmp_path / "generation_prompt.j2").write_text(
        "{{ project_name }}:{% for item in outline %}[{{ item }}]{% endfor %}",
        encoding="utf-8",
    )

    prompt = PromptBuilder(tmp_path, outline=["Overview", "Setup"]).build(_analysis())

    assert prompt == "shop:[Overview][Setup]"
