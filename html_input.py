"""Validate the HTML file handed to the deploy script."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional

from deploy_errors import InputValidationError, UsageError


HTML_SUFFIXES = {".htm", ".html"}
ROOT_TAG = "<html"
USAGE = "Usage: deploy-html-page <html-file>"


def resolve_input_path(raw_path: str, base_dir: Path) -> Path:
    path = Path(raw_path).expanduser()
    if not path.is_absolute():
        path = base_dir / path
    return path.absolute()


def has_root_tag(path: Path) -> bool:
    text = path.read_text(encoding="utf-8", errors="replace")
    return ROOT_TAG in text.lower()


def validate_html_file(
    raw_path: Optional[str],
    *,
    base_dir: Path,
    confirm: Callable[[str], bool],
) -> Path:
    """Return the absolute path of a deployable HTML file.

    Checks run in order: argument present, regular file, `.htm`/`.html`
    suffix, and an `<html` tag. A missing tag is not fatal on its own;
    `confirm` receives the warning text and decides whether to go on.
    """
    if not raw_path:
        raise UsageError(f"{USAGE}\nExample: deploy-html-page my-exported-file.html")

    path = resolve_input_path(raw_path, base_dir)
    if not path.is_file():
        raise InputValidationError(f"File '{path}' does not exist")

    if path.suffix.lower() not in HTML_SUFFIXES:
        raise InputValidationError(f"File '{path}' is not an HTML file")

    try:
        tagged = has_root_tag(path)
    except OSError as exc:
        raise InputValidationError(f"File '{path}' could not be read: {exc}") from exc

    if not tagged:
        warning = f"File '{path}' may not be a valid HTML file (no <html> tag found)"
        if not confirm(warning):
            raise InputValidationError("Aborted: file was not confirmed as HTML")

    return path
