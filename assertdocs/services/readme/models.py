"""Records produced while turning docblocks into README sections."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class ClassDoc:
    summary: str
    doc: str
    tags: Dict[str, List[str]] = field(default_factory=dict)

    def has_tag(self, name: str) -> bool:
        return name in self.tags


@dataclass(frozen=True)
class ParamDoc:
    """Documented parameter; ``default`` only counts when ``has_default`` is set."""

    type: str
    has_default: bool = False
    default: Any = None


@dataclass(frozen=True)
class MethodDoc:
    doc: str
    long: str = ""
    params: Dict[str, ParamDoc] = field(default_factory=dict)


@dataclass(frozen=True)
class MethodRecord:
    name: str
    doc: MethodDoc
    inverse: Optional["MethodRecord"] = None


@dataclass(frozen=True)
class ClassRecord:
    class_doc: ClassDoc
    methods: Dict[str, MethodRecord] = field(default_factory=dict)
