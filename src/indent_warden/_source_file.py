"""A Java file as the constraint sees it: name, raw text, parsed primary type.

Parsing is javalang's job. This module only picks which top-level type is
the primary one and turns javalang's failures into ParseError, so nothing
downstream ever sees a half-parsed file.
"""

import logging
import os
from dataclasses import dataclass
from typing import Any

import javalang
from javalang.parser import JavaParserBaseException
from javalang.tokenizer import LexerError

from indent_warden._parse_error import ParseError

log = logging.getLogger(__name__)


def _describe(exc):
    # JavaSyntaxError carries its text in .description, not in args.
    description = getattr(exc, "description", None) or str(exc)
    at = getattr(exc, "at", None)
    position = getattr(at, "position", None)
    if position:
        description = f"{description} at line {position[0]}"
    return description or type(exc).__name__


def _primary_type(unit, type_name):
    types = list(unit.types or [])
    for decl in types:
        if decl.name == type_name:
            return decl
    return types[0] if types else None


@dataclass(frozen=True)
class SourceFile:
    type_name: str
    raw_text: str
    primary_type: Any

    @classmethod
    def from_text(cls, text, type_name=None, path="<text>"):
        """Parse Java source. Falls back to the first top-level type
        when no type is called type_name."""
        try:
            unit = javalang.parse.parse(text)
        except (JavaParserBaseException, LexerError) as e:
            raise ParseError(path, _describe(e)) from e

        decl = _primary_type(unit, type_name)
        if decl is None:
            raise ParseError(path, "no top-level type declared")
        if decl.name != type_name:
            log.debug("%s: no type named %s, using %s", path, type_name, decl.name)
        return cls(decl.name, text, decl)

    @classmethod
    def from_path(cls, path):
        """Java keeps the public type in <TypeName>.java, so the stem names it."""
        try:
            with open(path, encoding="utf-8") as f:
                text = f.read()
        except UnicodeDecodeError as e:
            raise ParseError(path, f"not UTF-8 ({e.reason})") from e
        except OSError as e:
            raise ParseError(path, e.strerror or type(e).__name__) from e
        stem = os.path.splitext(os.path.basename(path))[0]
        return cls.from_text(text, stem, path)
