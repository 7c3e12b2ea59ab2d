import json
import sys
from pathlib import Path
import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


def _docblock(*lines: str) -> str:
    body = "".join(f"     * {line}\n" if line else "     *\n" for line in lines)
    return f"    /**\n{body}     */"


@pytest.fixture
def docblock():
    return _docblock


@pytest.fixture
def manifest_data():
    return {
        "classes": {
            "Gecko\\Asserts\\StringAssertTrait": {
                "doc": _docblock(
                    "Additional string asserts.",
                    "",
                    "Compares strings with care.",
                    "",
                    "@requires PHPUnit 6",
                ),
                "methods": [
                    {
                        "name": "assertStringIsEmpty",
                        "doc": _docblock(
                            "Assert that a string is empty.",
                            "",
                            "@param mixed  $actual",
                            "@param string $message",
                        ),
                        "parameters": [{"name": "actual"}, {"name": "message", "default": ""}],
                    },
                    {
                        "name": "assertStringIsNotEmpty",
                        "doc": _docblock(
                            "Assert that a string is not empty.",
                            "",
                            "@param mixed  $actual",
                            "@param string $message",
                        ),
                        "parameters": [{"name": "actual"}, {"name": "message", "default": ""}],
                    },
                    {"name": "helper", "doc": None, "public": False},
                ],
            },
            "Gecko\\Asserts\\AssertHelper": {
                "doc": _docblock("@internal"),
                "methods": [{"name": "undocumented", "doc": None}],
            },
        }
    }


@pytest.fixture
def manifest_file(tmp_path, manifest_data):
    path = tmp_path / "readme-manifest.json"
    path.write_text(json.dumps(manifest_data), encoding="utf-8")
    return path
