from assertdocs.core import config
from assertdocs.core.logging import setup as setup_logging
import typer
from assertdocs.services.readme.cli import app as readme_app

app = typer.Typer(help="assertdocs – README generator for assertion helper traits")

app.add_typer(readme_app, name="readme", help="Markdown README generator")

def main():
    setup_logging(config.get("ASSERTDOCS_LOG_LEVEL", "INFO"))
    app()
