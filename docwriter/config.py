"""Configuration loading for docwriter (.docwriter.yml)."""

from __future__ import annotations

from dataclasses import astuple, dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

CONFIG_FILENAME = ".docwriter.yml"

DEFAULT_OUTPUT_DIR = "docs"
DEFAULT_EXCLUDES: tuple[str, ...] = ("node_modules", "dist", "build", ".git")
DEFAULT_EXTENSIONS: tuple[str, ...] = (
    "js",
    "ts",
    "jsx",
    "tsx",
    "md",
    "json",
    "html",
    "css",
    "scss",
)


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class LLMConfig:
    """Narrative generator settings from .docwriter.yml."""

    model: Optional[str] = None
    base_url: Optional[str] = None
    api_key: Optional[str] = None
    temperature: Optional[float] = None
    max_tokens: Optional[int] = None
    request_timeout: Optional[float] = None


@dataclass
class DocWriterConfig:
    """Settings for a documentation run."""

    root: Path
    output_dir: str = DEFAULT_OUTPUT_DIR
    exclude_paths: List[str] = field(default_factory=lambda: list(DEFAULT_EXCLUDES))
    extensions: List[str] = field(default_factory=lambda: list(DEFAULT_EXTENSIONS))
    api_only: bool = False
    llm: Optional[LLMConfig] = None


def load_config(config_path: Path) -> DocWriterConfig:
    """Load configuration from ``config_path`` (a project dir or the file itself)."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return DocWriterConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    config = DocWriterConfig(root=root)

    output_dir = _as_str(data.get("output_dir"))
    if output_dir:
        config.output_dir = output_dir
    if "exclude_paths" in data:
        config.exclude_paths = _as_str_list(data.get("exclude_paths"))
    extensions = _as_str_list(data.get("extensions"))
    if extensions:
        config.extensions = [ext.lstrip(".") for ext in extensions]
    api_only = data.get("api_only", False)
    if isinstance(api_only, str):
        api_only = api_only.strip().lower() in {"true", "yes", "1"}
    config.api_only = api_only is True

    llm_data = data.get("llm")
    if isinstance(llm_data, dict):
        max_tokens = llm_data.get("max_tokens")
        llm = LLMConfig(
            model=_as_str(llm_data.get("model")),
            base_url=_as_str(llm_data.get("base_url")),
            api_key=_as_str(llm_data.get("api_key")),
            temperature=_as_float(llm_data.get("temperature")),
            max_tokens=max_tokens if type(max_tokens) is int else None,
            request_timeout=_as_float(llm_data.get("request_timeout")),
        )
        if any(value is not None for value in astuple(llm)):
            config.llm = llm

    return config


def parse_exclude_option(value: str | None) -> List[str] | None:
    """Split a comma separated ``--exclude`` value; None when not given."""
    if value is None:
        return None
    return [part.strip() for part in value.split(",") if part.strip()]


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.name != CONFIG_FILENAME:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_str(value: Any) -> Optional[str]:
    if isinstance(value, bool):
        return str(value).lower()
    return str(value) if isinstance(value, (str, int, float)) else None


def _as_float(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return None
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [part.strip() for part in value.split(",") if part.strip()]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float))]
    return []
