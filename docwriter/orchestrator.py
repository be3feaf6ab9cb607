"""Pipeline orchestration: scan, analyze, generate and persist documentation."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence

from .analyzers import analyze_project
from .config import DocWriterConfig, load_config
from .endpoints import extract_endpoints, render_endpoint_report, select_candidates
from .llm.runner import NarrativeGenerator
from .logging import get_logger
from .models import FileRecord, ProjectAnalysis
from .postproc.sections import split_sections
from .prompting.builder import PromptBuilder
from .publisher import DocumentationWriter
from .scanner import ProjectScanner


@dataclass
class RunOutcome:
    """What a documentation run produced."""

    output_dir: Path
    written: List[Path] = field(default_factory=list)
    endpoint_count: int = 0
    documentation_generated: bool = False


class Orchestrator:
    """Coordinates a documentation run for one project directory."""

    def __init__(
        self,
        scanner: ProjectScanner | None = None,
        prompt_builder: PromptBuilder | None = None,
        generator: NarrativeGenerator | None = None,
        *,
        max_workers: int | None = None,
    ) -> None:
        self.scanner = scanner
        self.prompt_builder = prompt_builder or PromptBuilder()
        self._generator = generator
        self.max_workers = max_workers
        self.logger = get_logger("orchestrator")

    def run(
        self,
        path: str | Path,
        *,
        output: str | None = None,
        exclude: Sequence[str] | None = None,
        api_only: bool | None = None,
    ) -> RunOutcome:
        """Generate documentation for the project at ``path``.

        Explicit arguments take precedence over ``.docwriter.yml``.
        """
        project_path = Path(path).expanduser().resolve()
        config = load_config(project_path)
        output_dir = project_path / (output or config.output_dir)
        only_api = config.api_only if api_only is None else api_only

        self.logger.info("Scanning project %s", project_path)
        scanner = self.scanner or ProjectScanner(config.extensions, max_workers=self.max_workers)
        records = scanner.scan(
            project_path,
            exclude=list(exclude) if exclude is not None else config.exclude_paths,
        )
        analysis = analyze_project(records, project_path)
        self.logger.info("Project analysis complete")

        writer = DocumentationWriter(output_dir)
        outcome = RunOutcome(output_dir=output_dir)

        if not only_api:
            outcome.written.extend(self._generate_documentation(analysis, writer, config))
            outcome.documentation_generated = True

        api_path = self._generate_api_docs(records, writer, outcome)
        if api_path is not None:
            outcome.written.append(api_path)

        if not only_api:
            outcome.written.append(writer.write_summary(analysis))

        self.logger.info("Documentation generated in %s", output_dir)
        return outcome

    def _generate_documentation(
        self,
        analysis: ProjectAnalysis,
        writer: DocumentationWriter,
        config: DocWriterConfig,
    ) -> List[Path]:
        prompt = self.prompt_builder.build(analysis)
        generator = self._resolve_generator(config)
        documentation = generator.run(prompt, system=PromptBuilder.SYSTEM_PROMPT)
        sections = split_sections(documentation)
        self.logger.debug("Generated documentation has %d sections", len(sections))
        return writer.write_documentation(documentation, sections)

    def _generate_api_docs(
        self,
        records: Sequence[FileRecord],
        writer: DocumentationWriter,
        outcome: RunOutcome,
    ) -> Optional[Path]:
        if not select_candidates(records):
            self.logger.debug("No route, controller or api files; skipping API documentation")
            return None

        self.logger.info("Generating API documentation...")
        endpoints = extract_endpoints(records, max_workers=self.max_workers)
        outcome.endpoint_count = len(endpoints)
        report = render_endpoint_report(endpoints)
        if report is None:
            self.logger.info("No API endpoints found in the project.")
            return None
        return writer.write_api_docs(report)

    def _resolve_generator(self, config: DocWriterConfig) -> NarrativeGenerator:
        if self._generator is not None:
            return self._generator
        llm = config.llm
        if llm is None:
            return NarrativeGenerator()
        kwargs: dict[str, object] = {}
        if llm.api_key is not None:
            kwargs["api_key"] = llm.api_key
        if llm.temperature is not None:
            kwargs["temperature"] = llm.temperature
        if llm.request_timeout is not None:
            kwargs["request_timeout"] = llm.request_timeout
        return NarrativeGenerator(
            llm.model,
            base_url=llm.base_url,
            max_tokens=llm.max_tokens,
            **kwargs,  # type: ignore[arg-type]
        )


__all__ = ["Orchestrator", "RunOutcome"]
