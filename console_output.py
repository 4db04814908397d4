"""Colored status lines for the deploy script.

Progress and results go to stdout; warnings and errors go to stderr.
"""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm


class Reporter:
    """Print one categorized line per event and ask the operator yes/no questions.

    Passing a single `console` routes every stream to it, which is how tests
    capture output.
    """

    def __init__(self, console: Optional[Console] = None, err_console: Optional[Console] = None) -> None:
        if console is None:
            console = Console(highlight=False)
            err_console = err_console or Console(stderr=True, highlight=False)
        self.console = console
        self.err_console = err_console or console

    def _line(self, console: Console, style: str, label: str, message: str) -> None:
        # "[INFO]" etc. are not markup tags (uppercase), only the message needs escaping.
        console.print(f"[{style}][{label}][/{style}] {escape(message)}", soft_wrap=True)

    def info(self, message: str) -> None:
        self._line(self.console, "blue", "INFO", message)

    def success(self, message: str) -> None:
        self._line(self.console, "green", "SUCCESS", message)

    def warning(self, message: str) -> None:
        self._line(self.err_console, "bold yellow", "WARNING", message)

    def error(self, message: str) -> None:
        for line in message.splitlines() or [""]:
            self._line(self.err_console, "red", "ERROR", line)

    def blank(self) -> None:
        self.console.print()

    def banner(self) -> None:
        self.console.print("🚀 GitHub Pages HTML Deployment Script")
        self.console.print("======================================")
        self.blank()

    def confirm(self, warning: str) -> bool:
        """Show `warning` and ask whether to continue; no answer means no."""
        self.warning(warning)
        try:
            return Confirm.ask("Continue anyway?", default=False, console=self.console)
        except EOFError:
            # stdin closed (CI, piped input)
            self.blank()
            return False

    def show_results(self, repo_name: str, repo_url: str, site_url: str) -> None:
        self.blank()
        self.success("Deployment completed successfully!")
        self.blank()
        self.console.print("📁 Repository Details:", soft_wrap=True)
        self.console.print(f"   Name: {escape(repo_name)}", soft_wrap=True)
        self.console.print(f"   URL:  {escape(repo_url)}", soft_wrap=True)
        self.blank()
        self.console.print("🌐 Live Website:", soft_wrap=True)
        self.console.print(f"   URL:  {escape(site_url)}", soft_wrap=True)
        self.blank()
        self.warning("Note: GitHub Pages may take a few minutes to become available")
        self.blank()
