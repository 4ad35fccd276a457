from __future__ import annotations

import csv
from pathlib import Path
from typing import Iterable

from rich.table import Table

from .models import BrokenReference, CrawlStats

CSV_FIELDS = ["Type", "Broken_URL", "Found_On_Page", "Page_Title"]


def format_reference(ref: BrokenReference) -> str:
    lines = [
        "--- BROKEN LINK FOUND ---",
        f"  Type       : {ref.kind.value}",
        f"  URL        : {ref.broken_url}",
        f"  Found On   : {ref.referrer}",
    ]
    if ref.page_title:
        lines.append(f"  Page Title : {ref.page_title}")
    lines.append("-" * 25)
    return "\n".join(lines)


def to_row(ref: BrokenReference) -> dict:
    return {
        "Type": ref.kind.value,
        "Broken_URL": ref.broken_url,
        "Found_On_Page": ref.referrer,
        "Page_Title": ref.page_title or "N/A",
    }


def write_csv(refs: Iterable[BrokenReference], path: Path) -> int:
    rows = [to_row(r) for r in refs]
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=CSV_FIELDS)
        writer.writeheader()
        writer.writerows(rows)
    return len(rows)


def ledger_table(refs: Iterable[BrokenReference]) -> Table:
    table = Table(title="Broken links")
    table.add_column("Type")
    table.add_column("Broken URL", overflow="fold")
    table.add_column("Found on page", overflow="fold")
    table.add_column("Page title")
    for r in refs:
        row = to_row(r)
        table.add_row(*(row[k] for k in CSV_FIELDS))
    return table


def summary_table(stats: CrawlStats, broken: int) -> Table:
    table = Table(title="Crawl summary")
    table.add_column("Metric")
    table.add_column("Value", justify="right")
    table.add_row("Pages visited", str(stats.pages_visited))
    table.add_row("Pages skipped (errors)", str(stats.pages_failed))
    table.add_row("Images checked", str(stats.images_checked))
    table.add_row("Images unverified", str(stats.images_unverified))
    table.add_row("Broken references", str(broken))
    return table
