"""Builds the narrative-generation prompt from a project analysis."""

from __future__ import annotations

import json
from pathlib import Path
from typing import List, Sequence

from jinja2 import Environment, FileSystemLoader

from ..models import ProjectAnalysis

DEFAULT_OUTLINE: tuple[str, ...] = (
    "Project Overview - Explain what this project does and its main features",
    "Installation Instructions - How to install and set up the project",
    "Usage Guide - How to use the project with examples",
    "API Documentation - Document the main functions, classes, and components",
    "Project Structure - Explain the organization of files and directories",
    "Development Guide - Instructions for developers who want to contribute",
)

NO_DEPENDENCIES = "None detected"
NO_MANIFEST = "No package.json found"
NO_README = "No README found"


class PromptBuilder:
    """Renders the generation prompt template with analysis facts."""

    SYSTEM_PROMPT = (
        "You are a senior technical writer. Stay grounded in the project facts you are given "
        "and never invent commands, files, or dependencies."
    )
    TEMPLATE_NAME = "generation_prompt.j2"

    def __init__(
        self,
        templates_dir: Path | None = None,
        *,
        outline: Sequence[str] | None = None,
    ) -> None:
        self.templates_dir = templates_dir
        self.outline = list(outline or DEFAULT_OUTLINE)
        self._env = self._create_env(templates_dir)

    def build(self, analysis: ProjectAnalysis) -> str:
        template = self._env.get_template(self.TEMPLATE_NAME)
        return template.render(
            project_name=analysis.project_name,
            file_count=analysis.file_count,
            languages=self.format_languages(analysis.languages),
            dependencies=", ".join(analysis.dependencies) or NO_DEPENDENCIES,
            outline=self.outline,
            package_info=(
                json.dumps(analysis.package_info, indent=2)
                if analysis.package_info is not None
                else NO_MANIFEST
            ),
            readme=analysis.readme or NO_README,
        )

    @staticmethod
    def format_languages(languages: dict[str, int]) -> str:
        return ", ".join(f"{ext} ({count} files)" for ext, count in languages.items())

    @staticmethod
    def _create_env(templates_dir: Path | None) -> Environment:
        directories: List[str] = []
        if templates_dir:
            directories.append(str(templates_dir))
        directories.append(str(Path(__file__).with_name("templates")))
        loader = FileSystemLoader(directories)
        return Environment(
            loader=loader,
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )


__all__ = ["DEFAULT_OUTLINE", "PromptBuilder"]
