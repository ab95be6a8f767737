"""Read-only lookup of locally available reference documents"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path


RESOURCE_SUFFIX = ".md"


class ResourceIndex(ABC):
    @abstractmethod
    def exists(self, category: str, slug: str) -> bool:
        """Return True when resources/<category>/<slug>.md is available locally."""
        raise NotImplementedError


@dataclass
class FileResourceIndex(ResourceIndex):
    """Resource index backed by a directory tree; queried by exact slug."""
    root: Path

    def path_for(self, category: str, slug: str) -> Path:
        return Path(self.root) / category / f"{slug}{RESOURCE_SUFFIX}"

    def exists(self, category: str, slug: str) -> bool:
        try:
            return self.path_for(category, slug).is_file()
        except (OSError, ValueError):
            # Slugs that cannot form a path (NUL bytes, too long) are not local.
            return False


@dataclass
class MemoryResourceIndex(ResourceIndex):
    _entries: set[tuple[str, str]] = field(default_factory=set)

    @classmethod
    def of(cls, category: str, *slugs: str) -> MemoryResourceIndex:
        return cls({(category, s) for s in slugs})

    def add(self, category: str, slug: str) -> None:
        self._entries.add((category, slug))

    def exists(self, category: str, slug: str) -> bool:
        return (category, slug) in self._entries
