"""
Shared console output helpers built on rich.
"""
import logging

from rich.console import Console as RichConsole
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table
from rich.theme import Theme

CUSTOM_THEME = Theme({
    "info": "cyan bold",
    "success": "green bold",
    "warning": "yellow bold",
    "error": "red bold",
    "heading": "bold underline",
})

# Global console instance
console = RichConsole(theme=CUSTOM_THEME, soft_wrap=True)
# Log records go to stderr so command output stays machine readable
err_console = RichConsole(theme=CUSTOM_THEME, stderr=True)


def setup_logging(verbose: bool = False) -> None:
    """Route library logging through rich, on stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False, markup=False)],
        force=True,
    )


def info(message: str):
    console.print(f"💡 [info]INFO[/info]: {escape(message)}")


def success(message: str):
    console.print(f"✅ [success]SUCCESS[/success]: {escape(message)}")


def warning(message: str):
    console.print(f"⚠️  [warning]WARNING[/warning]: {escape(message)}")


def error(message: str):
    console.print(f"❌ [error]ERROR[/error]: {escape(message)}")


def heading(title: str):
    console.print(f"\n🎯 [heading]{escape(title)}[/heading]\n")


def plain(text: str):
    """Print text verbatim: no markup, no highlighting."""
    console.print(text, markup=False, highlight=False, emoji=False)


def confirm(prompt: str, default: bool = True) -> bool:
    """Y/N confirmation"""
    yes_no = "[Y/n]" if default else "[y/N]"
    response = console.input(f"❓ {prompt} {yes_no}: ", markup=False).strip().lower()
    if not response:
        return default
    return response in ("y", "yes")


def print_table(rows: list, headers: list, title: str = None):
    table = Table(title=title, show_header=True, header_style="bold magenta")
    for h in headers:
        table.add_column(h)
    for row in rows:
        table.add_row(*[escape(str(cell)) for cell in row])
    console.print(table)


def show_welcome():
    console.print("\n" + "═" * 50, style="bold blue")
    console.print("🚀 [bold green]civra[/bold green] - LLM response parser & context selector")
    console.print("═" * 50 + "\n", style="bold blue")
