from typing import Any, Dict, Iterator, Tuple

from .models import ClassRecord, MethodDoc, ParamDoc
from .template import README_TEMPLATE, fill

NAMESPACE_SEPARATOR = "\\"
INVERSE_INTRO = "The inverse assertion"


def short_name(class_name: str) -> str:
    return class_name.rsplit(NAMESPACE_SEPARATOR, 1)[-1]


def literal(value: Any) -> str:
    if isinstance(value, str):
        return f"'{value}'"
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def signature(params: Dict[str, ParamDoc]) -> str:
    out = ""
    for i, (name, param) in enumerate(params.items()):
        sep = ", " if i else ""
        if param.has_default:
            out += f"{' ' if i else ''}[{sep}{param.type} ${name} = {literal(param.default)}]"
        else:
            out += f"{sep}{param.type} ${name}"
    return out


def method_block(name: str, doc: MethodDoc) -> str:
    return f"\n#### {name}()\n###### {name}({signature(doc.params)})\n{doc.doc}\n"


class ReadmeRenderer:
    def __init__(self, template: str = README_TEMPLATE):
        self.template = template

    def render(self, records: Dict[str, ClassRecord]) -> str:
        listing, body = self.sections(records)
        return fill(listing, body, self.template)

    def sections(self, records: Dict[str, ClassRecord]) -> Tuple[str, str]:
        listing = ""
        body = ""
        for class_name, record in sorted(records.items()):
            if record.class_doc.has_tag("internal"):
                continue
            listing += f"\n- **{short_name(class_name)}**<br/>\n  {record.class_doc.summary}"
            body += "".join(self._class_section(class_name, record))
        return listing, body

    def _class_section(self, class_name: str, record: ClassRecord) -> Iterator[str]:
        class_doc = record.class_doc
        yield f"\n## {short_name(class_name)}\n###### {class_name}\n{class_doc.doc}\n"
        if class_doc.doc:
            yield "\n"

        requires = class_doc.tags.get("requires")
        if requires is not None:
            if len(requires) == 1:
                yield f"Requires {requires[0]}.\n"
            else:
                yield "Requires:\n"
                yield from (f"* {line}\n" for line in requires if line)

        yield "\n### Methods\n"
        for name, method in record.methods.items():
            yield method_block(name, method.doc)
            if method.inverse is not None:
                yield f"\n{INVERSE_INTRO}{method_block(method.inverse.name, method.inverse.doc)}\n"
