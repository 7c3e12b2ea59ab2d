"""README generation pipeline: reflect, parse, validate, merge, render."""

from typing import Dict, Iterable, Optional

from assertdocs.core import logging as log
from .errors import (
    EmptyDescriptionError,
    MalformedParamTagError,
    MethodParseError,
    MissingClassDocError,
    MissingMethodDocError,
    ParameterMismatchError,
)
from .merger import merge_negatives
from .models import ClassRecord, MethodDoc, MethodRecord, ParamDoc
from .parser import ClassDocParser, MethodDocParser
from .reflection import ReflectedClass, ReflectedMethod, Reflector
from .renderer import ReadmeRenderer

logger = log.get_logger("assertdocs.readme")


class ReadmeGenerator:
    def __init__(self, reflector: Reflector, renderer: Optional[ReadmeRenderer] = None):
        self.reflector = reflector
        self.renderer = renderer or ReadmeRenderer()

    def generate(self, class_names: Iterable[str]) -> str:
        return self.renderer.render(self.collect(class_names))

    def collect(self, class_names: Iterable[str]) -> Dict[str, ClassRecord]:
        """Parsed, merged records keyed by class name, sorted; internal classes left out."""
        records = {}
        for class_name in class_names:
            record = self._class_record(self.reflector.reflect(class_name))
            if record is not None:
                records[class_name] = record
        return dict(sorted(records.items()))

    def _class_record(self, reflected: ReflectedClass) -> Optional[ClassRecord]:
        class_doc = ClassDocParser.parse(reflected.doc_comment)
        if class_doc is None:
            raise MissingClassDocError(reflected.name)
        if class_doc.has_tag("internal"):
            logger.info("Skipping internal class %s", reflected.name)
            return None

        methods = {}
        for method in reflected.methods:
            if not method.public:
                continue
            methods[method.name] = MethodRecord(method.name, self._method_doc(reflected.name, method))

        logger.debug("Parsed %s with %d public methods", reflected.name, len(methods))
        return ClassRecord(class_doc, merge_negatives(methods))

    def _method_doc(self, class_name: str, method: ReflectedMethod) -> MethodDoc:
        try:
            doc = MethodDocParser.parse(method.doc_comment)
        except MalformedParamTagError as e:
            raise MethodParseError(class_name, method.name) from e

        if doc is None:
            raise MissingMethodDocError(class_name, method.name)
        if doc.doc == "":
            raise EmptyDescriptionError(class_name, method.name)

        reflected = {p.name: p for p in method.parameters}
        for name in reflected:
            if name not in doc.params:
                raise ParameterMismatchError(class_name, method.name, name)
        for name in doc.params:
            if name not in reflected:
                raise ParameterMismatchError(class_name, method.name, name)

        params = {}
        for p in method.parameters:
            documented = doc.params[p.name]
            params[p.name] = ParamDoc(documented.type, p.has_default, p.default) if p.has_default else documented
        return MethodDoc(doc.doc, doc.long, params)


def generate(class_names: Iterable[str], reflector: Reflector) -> str:
    return ReadmeGenerator(reflector).generate(class_names)
