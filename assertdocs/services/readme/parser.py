"""Docblock parsers for class and method comments.

Only the small subset of docblock syntax the README needs is understood:

    /**
     * Summary paragraph.
     *
     * Long description.
     *
     * @param string $name description
     * @requires ext-intl
     */

Each parser is a two-state machine over the trimmed comment lines; a bare
``*`` line moves it from the first (summary) state to the second.
"""

import re
from enum import Enum
from typing import Dict, List, Optional

from .errors import MalformedParamTagError
from .models import ClassDoc, MethodDoc, ParamDoc

OPEN = "/**"
CLOSE = "*/"
BLANK = "*"
TAG_PREFIX = "* @"
PARAM_PREFIX = "* @param"

_LINE = re.compile(r"[^\n\r]+")
_PARAM = re.compile(r"^\s*(?P<type>\S+)\s+\$(?P<name>\w+)(?P<description>.*)$")


class ClassState(Enum):
    SUMMARY = "summary"
    DOC = "doc"


class MethodState(Enum):
    SHORT = "doc"
    LONG = "long"


def content_lines(comment: Optional[str]) -> List[str]:
    """Trimmed non-blank lines of ``comment``, or ``[]`` when it holds nothing but delimiters."""
    lines = [m.group(0).strip() for m in _LINE.finditer(comment or "")]
    lines = [line for line in lines if line]
    if all(line in (OPEN, CLOSE) for line in lines):
        return []
    return lines


def _strip_marker(line: str) -> str:
    return line[2:]


class ClassDocParser:
    def __init__(self):
        self.state = ClassState.SUMMARY
        self.buffers = {ClassState.SUMMARY: [], ClassState.DOC: []}
        self.tags: Dict[str, List[str]] = {}

    def feed(self, line: str) -> bool:
        """Consume one trimmed line; returns False once the block is closed."""
        if line == OPEN:
            return True
        if line == CLOSE:
            return False
        if line == BLANK:
            self.state = ClassState.DOC
        if line.startswith(TAG_PREFIX):
            self._tag(line[2:].strip())
        elif len(line) > 2:
            self.buffers[self.state].append(_strip_marker(line).lstrip() + "\n")
        return True

    def _tag(self, text: str):
        parts = re.split(r"\s+", text, maxsplit=1)
        name = parts[0][1:]
        self.tags.setdefault(name, []).append(parts[1] if len(parts) > 1 else "")

    def result(self) -> ClassDoc:
        return ClassDoc(
            summary="".join(self.buffers[ClassState.SUMMARY]).strip(),
            doc="".join(self.buffers[ClassState.DOC]).strip(),
            tags=self.tags,
        )

    @classmethod
    def parse(cls, comment: Optional[str]) -> Optional[ClassDoc]:
        lines = content_lines(comment)
        if not lines:
            return None
        parser = cls()
        for line in lines:
            if not parser.feed(line):
                break
        return parser.result()


class MethodDocParser:
    def __init__(self, comment: str):
        self.comment = comment
        self.state = MethodState.SHORT
        self.buffers = {MethodState.SHORT: [], MethodState.LONG: []}
        self.params: Dict[str, ParamDoc] = {}

    def feed(self, line: str):
        if line in (OPEN, CLOSE):
            return
        if line == BLANK:
            self.state = MethodState.LONG
            return
        if line.startswith(PARAM_PREFIX):
            self._param(line[len(PARAM_PREFIX):])
            return
        self.buffers[self.state].append(_strip_marker(line) + "\n")

    def _param(self, text: str):
        m = _PARAM.match(text)
        if m is None:
            raise MalformedParamTagError(self.comment)
        self.params[m.group("name")] = ParamDoc(type=m.group("type"))

    def result(self) -> MethodDoc:
        return MethodDoc(
            doc="".join(self.buffers[MethodState.SHORT]).strip(),
            long="".join(self.buffers[MethodState.LONG]).strip(),
            params=self.params,
        )

    @classmethod
    def parse(cls, comment: Optional[str]) -> Optional[MethodDoc]:
        lines = content_lines(comment)
        if not lines:
            return None
        parser = cls(comment)
        for line in lines:
            parser.feed(line)
        return parser.result()
