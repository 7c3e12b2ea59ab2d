import difflib
from pathlib import Path
from typing import List, Optional
import typer
from rich import print
from rich.markup import escape
from assertdocs.core import config
from assertdocs.core import logging as log
from .errors import DocGenerationError
from .generator import ReadmeGenerator
from .reflection import ManifestReflector

app = typer.Typer(help="README generator for assertion traits")

DEFAULT_MANIFEST = "readme-manifest.json"
DEFAULT_README = "README.md"


def _generate(manifest: Optional[Path], classes: Optional[List[str]]) -> str:
    manifest = manifest or Path(config.get("ASSERTDOCS_MANIFEST", DEFAULT_MANIFEST))
    try:
        reflector = ManifestReflector.from_path(manifest)
        return ReadmeGenerator(reflector).generate(classes or reflector.class_names())
    except DocGenerationError as e:
        print(f"[red]❌ {escape(str(e))}[/red]")
        if e.__cause__ is not None:
            print(f"[red]{escape(str(e.__cause__))}[/red]")
        raise typer.Exit(code=2)


@app.command("run")
def run(
    classes: Optional[List[str]] = typer.Argument(
        None, help="Fully-qualified class names (default: every class in the manifest)"
    ),
    manifest: Optional[Path] = typer.Option(None, "--manifest", help="Reflection manifest (JSON)"),
    out: Optional[Path] = typer.Option(None, "--out", help="README file to write"),
):
    log.setup(config.get("ASSERTDOCS_LOG_LEVEL", "INFO"))
    content = _generate(manifest, classes)
    out = out or Path(config.get("ASSERTDOCS_README", DEFAULT_README))
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(content, encoding="utf-8")
    print(f"📄 README generated at {out}")


@app.command("check")
def check(
    classes: Optional[List[str]] = typer.Argument(
        None, help="Fully-qualified class names (default: every class in the manifest)"
    ),
    manifest: Optional[Path] = typer.Option(None, "--manifest", help="Reflection manifest (JSON)"),
    readme: Optional[Path] = typer.Option(None, "--readme", help="README file to compare"),
):
    log.setup(config.get("ASSERTDOCS_LOG_LEVEL", "INFO"))
    expected = _generate(manifest, classes)
    readme = readme or Path(config.get("ASSERTDOCS_README", DEFAULT_README))
    actual = readme.read_text(encoding="utf-8") if readme.exists() else ""

    if actual == expected:
        print(f"✅ {readme} is up-to-date.")
        return

    diff = difflib.unified_diff(
        actual.splitlines(keepends=True),
        expected.splitlines(keepends=True),
        fromfile=str(readme),
        tofile="generated",
    )
    print(escape("".join(diff)))
    print(f"[yellow]⚠️  {readme} is stale, regenerate it with `assertdocs readme run`.[/yellow]")
    raise typer.Exit(code=1)
