"""Reflection data the generator consumes.

The generator never inspects code itself. A ``Reflector`` hands it, per
fully-qualified class name, the raw class docblock plus every method with its
docblock and declared parameters. ``ManifestReflector`` serves that data from a
precomputed JSON manifest::

    {
      "classes": {
        "Vendor\\Asserts\\FileAssertTrait": {
          "doc": "/**\\n * Summary.\\n */",
          "methods": [
            {"name": "assertFileIsEmpty", "doc": "/** ... */",
             "parameters": [{"name": "filename"}, {"name": "message", "default": ""}]}
          ]
        }
      }
    }

A ``default`` key on a parameter means the parameter declares a default value,
even when that value is ``null``.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Protocol

from .errors import ManifestError, ReflectionError


@dataclass(frozen=True)
class ReflectedParameter:
    name: str
    has_default: bool = False
    default: Any = None


@dataclass(frozen=True)
class ReflectedMethod:
    name: str
    doc_comment: Optional[str]
    parameters: List[ReflectedParameter] = field(default_factory=list)
    public: bool = True


@dataclass(frozen=True)
class ReflectedClass:
    name: str
    doc_comment: Optional[str]
    methods: List[ReflectedMethod] = field(default_factory=list)


class Reflector(Protocol):
    def reflect(self, class_name: str) -> ReflectedClass:
        ...


class ManifestReflector:
    def __init__(self, classes: Dict[str, ReflectedClass]):
        self._classes = classes

    @classmethod
    def from_path(cls, path: Path) -> "ManifestReflector":
        try:
            data = json.loads(Path(path).read_text(encoding="utf-8"))
        except OSError as e:
            raise ManifestError(path, f"cannot be read ({e.strerror})") from e
        except json.JSONDecodeError as e:
            raise ManifestError(path, f"not valid JSON ({e.msg}, line {e.lineno})") from e
        return cls.from_dict(data, source=path)

    @classmethod
    def from_dict(cls, data: Any, source="<manifest>") -> "ManifestReflector":
        if not isinstance(data, dict) or not isinstance(data.get("classes"), dict):
            raise ManifestError(source, 'expected an object with a "classes" mapping')

        classes = {}
        for class_name, entry in data["classes"].items():
            if not isinstance(entry, dict):
                raise ManifestError(source, f'entry for "{class_name}" must be an object')
            methods = [_method(source, class_name, m) for m in entry.get("methods") or []]
            classes[class_name] = ReflectedClass(class_name, entry.get("doc"), methods)
        return cls(classes)

    def class_names(self) -> List[str]:
        return list(self._classes)

    def reflect(self, class_name: str) -> ReflectedClass:
        try:
            return self._classes[class_name]
        except KeyError:
            raise ReflectionError(class_name) from None


def _method(source, class_name: str, entry: Any) -> ReflectedMethod:
    if not isinstance(entry, dict) or not entry.get("name"):
        raise ManifestError(source, f'every method of "{class_name}" needs a "name"')
    params = []
    for p in entry.get("parameters") or []:
        if not isinstance(p, dict) or not p.get("name"):
            raise ManifestError(source, f'parameter of "{class_name}:{entry["name"]}" needs a "name"')
        params.append(ReflectedParameter(p["name"].lstrip("$"), "default" in p, p.get("default")))
    return ReflectedMethod(entry["name"], entry.get("doc"), params, bool(entry.get("public", True)))
