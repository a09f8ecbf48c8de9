import typer
from brokenlinks.core.config import VERSION
from brokenlinks.core.logging import setup as setup_logging
from brokenlinks.services.linkcheck.cli import app as check_app

app = typer.Typer(help="brokenlinks – concurrent broken-link checker")

app.add_typer(check_app, name="check", help="Crawl a site and report broken links")

def _version(value: bool):
    if value:
        typer.echo(f"brokenlinks {VERSION}")
        raise typer.Exit()

@app.callback()
def root(
    version: bool = typer.Option(
        False, "--version", callback=_version, is_eager=True, help="Show version"
    ),
):
    pass

def main():
    setup_logging("WARNING")
    app()
