from linkaudit.core.logging import setup as setup_logging
import typer
from linkaudit.services.linkscan.cli import app as linkscan_app

app = typer.Typer(help="linkaudit – broken link and image auditor")

app.add_typer(linkscan_app, name="linkscan", help="Broken-links crawler")

def main():
    setup_logging()
    app()
