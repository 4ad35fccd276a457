import os
from pathlib import Path
from typing import Optional

import typer
from rich import print

from linkaudit.core import config
from linkaudit.core import logging as log
from .crawler import crawl
from .report import ledger_table, summary_table, write_csv
from .scope import is_absolute_http

DEFAULT_OUTPUT = "all_broken_links.csv"

app = typer.Typer(help="Find 404 pages and images under a site prefix.")


@app.callback()
def main():
    """Crawl a site prefix and report broken links and images."""


def _check_writable(path: Path) -> Optional[str]:
    if path.is_dir():
        return f"{path} is a directory"
    parent = path.parent
    try:
        parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        return f"cannot create {parent}: {e.strerror or e}"
    if path.exists() and not os.access(path, os.W_OK):
        return f"{path} is not writable"
    if not os.access(parent, os.W_OK):
        return f"{parent} is not writable"
    return None


@app.command("run")
def run(
    url: Optional[str] = typer.Argument(
        None, help="Root URL; only links starting with it are crawled"
    ),
    out: Optional[Path] = typer.Option(None, "--out", help="CSV report path"),
    timeout: Optional[float] = typer.Option(None, help="Per-request timeout (s)"),
    limit: Optional[int] = typer.Option(None, help="Max pages to visit"),
    user_agent: Optional[str] = typer.Option(None, help="User-Agent header"),
    log_level: Optional[str] = typer.Option(None, help="DEBUG, INFO, WARNING..."),
    fail_on_broken: bool = typer.Option(
        False, "--fail-on-broken", help="Exit 1 when broken links are found"
    ),
):
    logger = log.setup(log_level or config.get("LINKAUDIT_LOG_LEVEL", "INFO"))

    root_url = url or config.get("LINKAUDIT_ROOT_URL")
    if not root_url or not is_absolute_http(root_url):
        print(f"[red]✗ Root URL must be an absolute http(s) URL[/red]: {root_url}")
        raise typer.Exit(code=2)

    out_path = out or Path(config.get("LINKAUDIT_OUTPUT", DEFAULT_OUTPUT))
    problem = _check_writable(out_path)
    if problem:
        print(f"[red]✗ Output not writable[/red]: {problem}")
        raise typer.Exit(code=2)

    try:
        if timeout is None:
            timeout = config.get_float("LINKAUDIT_TIMEOUT", 10.0)
        if limit is None:
            limit = config.get_int("LINKAUDIT_LIMIT")
    except ValueError as e:
        print(f"[red]✗ Invalid configuration[/red]: {e}")
        raise typer.Exit(code=2)

    crawler = crawl(
        root_url,
        timeout=timeout,
        user_agent=user_agent or config.get("LINKAUDIT_USER_AGENT"),
        limit=limit,
    )
    ledger = crawler.ledger

    print(summary_table(crawler.stats, len(ledger)))
    if not len(ledger):
        print("[bold][green]✅ Crawl finished. No broken links found![/green][/bold]")
        return

    print(ledger_table(ledger))
    print(
        f"[bold][yellow]⚠ Crawl finished. Found {len(ledger)} broken links.[/yellow][/bold]"
        f" Writing to {out_path}..."
    )
    try:
        write_csv(ledger, out_path)
    except OSError as e:
        logger.error("Could not write %s: %s", out_path, e)
        raise typer.Exit(code=2)
    print(f"📁 CSV file written: {out_path}")
    if fail_on_broken:
        raise typer.Exit(code=1)
