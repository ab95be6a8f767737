"""Macro grammar and the shared find / render / splice substitution step

A macro is ``{{name("term"[, "label"])}}``. Each family is described by a
``MacroGrammar``: the accepted name spelling(s) as a regex fragment, how many
quoted arguments it takes, and whether it must sit directly inside an HTML tag
pair. Arguments are double-quoted and may not contain a double quote; anything
else fails to match and passes through untouched.
"""

import re
from dataclasses import dataclass
from typing import Callable

from loguru import logger

from yarimd.core.models import MacroMatch


TERM_ARG = r'"(?P<term>[^"]+)"'
LABEL_ARG = r'(?:,\s*"(?P<label>[^"]*)")?'
OPEN_TAG = r'(?P<open><[^>]*>)'
CLOSE_TAG = r'(?P<close></[^>]*>)'


@dataclass(frozen=True)
class MacroGrammar:
    name:    str            # regex fragment for the macro name
    arity:   int = 2        # 1 = term only, 2 = term + optional label
    wrapped: bool = False   # directly enclosed by <tag>...</tag>

    def __post_init__(self):
        if self.arity not in (1, 2):
            raise ValueError(f"Unsupported macro arity: {self.arity}")

    @property
    def regex(self) -> str:
        args = TERM_ARG + (LABEL_ARG if self.arity == 2 else "")
        body = r"\{\{(?P<name>" + self.name + r")\(" + args + r"\)\}\}"
        return OPEN_TAG + body + CLOSE_TAG if self.wrapped else body

    def compile(self) -> re.Pattern:
        return re.compile(self.regex)


def substitute(
    pattern: re.Pattern,
    text: str,
    render: Callable[[re.Match], str],
    what: str,
    ) -> str:
    """Replace every non-overlapping match of pattern with render(match); log the outcome."""
    count = 0

    def _render(m: re.Match) -> str:
        nonlocal count
        count += 1
        return render(m)

    result = pattern.sub(_render, text)
    if count:
        logger.info(f"Substituted {count} {what} match(es)")
    else:
        logger.debug(f"No {what} matches found")
    return result


def substitute_macros(
    grammar: MacroGrammar,
    text: str,
    render: Callable[[MacroMatch], str],
    what: str,
    ) -> str:
    """substitute() for a macro family: each match is parsed into a MacroMatch first."""
    return substitute(grammar.compile(), text, lambda m: render(MacroMatch.from_match(m)), what)
