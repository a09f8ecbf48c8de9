import typer
from rich.console import Console
from rich.table import Table
from brokenlinks.core import logging as log
from brokenlinks.core.config import get_float, get_int
from brokenlinks.core.utils import human_bytes
from .crawler import crawl
from .models import InvalidBaseURL, Outcome

app = typer.Typer()
out = Console(highlight=False, soft_wrap=True)
err = Console(stderr=True, highlight=False)

def _printer(quiet: bool):
    def on_outcome(o: Outcome):
        if o.ok and quiet:
            return
        out.print(o.line(), style="green" if o.ok else "bold red", markup=False)
    return on_outcome

@app.command("run")
def run(
    base: str = typer.Argument(..., help="Base URL (eg https://example.com)"),
    timeout: float = typer.Option(
        get_float("BROKENLINKS_TIMEOUT", 10.0), "--timeout", "-t", min=0.1,
        help="Quiescence window in seconds",
    ),
    thread: int = typer.Option(
        get_int("BROKENLINKS_WORKERS", 4), "--thread", "-T", min=1, help="Worker threads"
    ),
    request_timeout: float = typer.Option(
        get_float("BROKENLINKS_REQUEST_TIMEOUT", 30.0), min=0.1, help="Per-request HTTP timeout"
    ),
    no_verify: bool = typer.Option(False, help="Disable TLS verify (testing only)"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only print broken links"),
    summary: bool = typer.Option(False, help="Print a table of broken links at the end"),
    log_level: str = typer.Option("WARNING", help="Log level"),
):
    _ = log.setup(log_level)
    try:
        report = crawl(
            base,
            timeout=timeout,
            workers=thread,
            request_timeout=request_timeout,
            verify=not no_verify,
            on_outcome=_printer(quiet),
        )
    except InvalidBaseURL as e:
        err.print(str(e), style="red", markup=False)
        raise typer.Exit(code=2)

    if summary and report.broken:
        table = Table(title="Broken links")
        table.add_column("URL")
        table.add_column("Kind")
        table.add_column("Detail")
        for o in report.broken:
            table.add_row(o.url, o.error.value if o.error else "", o.detail)
        out.print(table)
    elif summary:
        out.print("✅ No broken links.")

    note = f" ({human_bytes(report.bytes_parsed)} of HTML parsed in {report.elapsed:.1f}s)"
    err.print(f"{report.visited} urls" + note, markup=False)
    if report.quiescent and report.abandoned:
        err.print(f"{report.abandoned} url(s) gave no result in time and were reported KO", markup=False)
    out.print("Finish")
