"""Core data models shared across docwriter components."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union


@dataclass(frozen=True)
class FileRecord:
    """A scanned project file with its text content."""

    relative_path: str
    content: str
    extension: str


@dataclass
class FileNode:
    """Leaf of the project tree."""

    extension: str


@dataclass
class DirectoryNode:
    """Directory in the project tree; children keep insertion order."""

    children: Dict[str, "TreeNode"] = field(default_factory=dict)


TreeNode = Union[DirectoryNode, FileNode]


@dataclass(frozen=True)
class ParameterDescriptor:
    """A documented endpoint parameter."""

    type: str
    name: str
    description: str


@dataclass(frozen=True)
class ReturnDescriptor:
    """The documented return value of an endpoint."""

    type: str
    description: str


@dataclass(frozen=True)
class Endpoint:
    """An HTTP endpoint extracted from a router declaration."""

    method: str
    path: str
    description: str
    parameters: List[ParameterDescriptor] = field(default_factory=list)
    returns: ReturnDescriptor = field(
        default_factory=lambda: ReturnDescriptor(type="void", description="No return value")
    )

    @property
    def key(self) -> str:
        return f"{self.method} {self.path}"


@dataclass
class ProjectAnalysis:
    """Structural and dependency profile of a scanned project."""

    project_name: str
    project_path: str
    file_count: int
    languages: Dict[str, int]
    structure: DirectoryNode
    dependencies: Dict[str, str] = field(default_factory=dict)
    package_info: Optional[Dict[str, Any]] = None
    readme: Optional[str] = None
