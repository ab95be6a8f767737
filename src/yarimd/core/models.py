"""Transient data models for the rewrite pipeline"""

import re
from dataclasses import dataclass
from pathlib import Path, PurePath
from typing import Optional

from yarimd.config import Settings
from yarimd.core.resources import ResourceIndex


@dataclass(frozen=True)
class MacroMatch:
    """One parsed macro occurrence; lives only inside a single substitution."""
    name:      str
    term:      str
    label:     Optional[str] = None
    open_tag:  Optional[str] = None     # verbatim, attributes included
    close_tag: Optional[str] = None

    @property
    def display(self) -> str:
        """Label when given and non-empty, else the term verbatim."""
        return self.label or self.term

    @classmethod
    def from_match(cls, m: re.Match) -> "MacroMatch":
        groups = m.groupdict()
        return cls(
            name=groups["name"],
            term=groups["term"],
            label=groups.get("label"),
            open_tag=groups.get("open"),
            close_tag=groups.get("close"),
        )


@dataclass(frozen=True)
class RewriteContext:
    """Everything a stage may consult besides the text itself."""
    path:     PurePath                  # relative to the content root
    index:    ResourceIndex
    settings: Settings

    @property
    def depth(self) -> int:
        """Directory levels between the content root and the file."""
        return max(len(self.path.parts) - 1, 0)


@dataclass
class FileResult:
    """Outcome of rewriting one file on disk."""
    path:      Path
    original:  str
    rewritten: str
    written:   bool = False

    @property
    def changed(self) -> bool:
        return self.original != self.rewritten
