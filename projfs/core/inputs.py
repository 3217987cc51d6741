"""Input records passed to every projfs operation."""
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

RootLike = Union[str, Path]

@dataclass(frozen=True)
class DirectoryInput:
    """A project root and one path relative to it."""
    project_root: RootLike
    path: str

@dataclass(frozen=True)
class CopyInput:
    """A project root with a source and a target path."""
    project_root: RootLike
    source: str
    target: str

@dataclass(frozen=True)
class ZipInput(CopyInput):
    """Copy-style input plus the archive name (without ``.zip``)."""
    name: str = ""

@dataclass(frozen=True)
class FileWriteInput(DirectoryInput):
    content: Optional[str] = None
