"""Tree-model datatypes shared by state, row projection, and rendering."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class NodeKind(str, Enum):
    """Kind of one tree node."""

    FILE = "file"
    DIRECTORY = "dir"


class TreeModelError(ValueError):
    """Raised when external tree input cannot be turned into nodes."""


@dataclass(frozen=True)
class Node:
    """One immutable entry of the hierarchy: a file leaf or a directory."""

    name: str
    kind: NodeKind
    children: tuple[Node, ...] = field(default_factory=tuple)
    note: str | None = None

    @property
    def is_dir(self) -> bool:
        return self.kind is NodeKind.DIRECTORY

    @classmethod
    def file(cls, name: str, note: str | None = None) -> Node:
        return cls(name, NodeKind.FILE, (), note)

    @classmethod
    def directory(cls, name: str, children=(), note: str | None = None) -> Node:
        """Build a directory node; ``children=None`` is an empty folder."""
        return cls(name, NodeKind.DIRECTORY, tuple(children or ()), note)
