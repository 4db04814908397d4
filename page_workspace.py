"""Throwaway git repository holding the page to publish."""

from __future__ import annotations

import os
import shutil
import signal
import tempfile
import threading
import time
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from console_output import Reporter
from deploy_errors import WorkspaceError
from github_cli import CommandError, Git, pages_url


WORKSPACE_PREFIX = "gh-pages-deploy"
ENTRY_POINT = "index.html"
COMMITTER_NAME = "GitHub Pages Deploy"
COMMITTER_EMAIL = "action@github.com"
CLEANUP_SIGNALS = (signal.SIGINT, signal.SIGTERM)

GITIGNORE_TEMPLATE = """\
# macOS
.DS_Store

# Temporary files
*.tmp
*.temp

# Editor files
*.swp
*.swo
*~
"""


def render_readme(repo_name: str, original_name: str, live_url: str, deployed_at: str) -> str:
    return f"""\
# {repo_name}

Automatically deployed HTML file to GitHub Pages.

- **Deployed on**: {deployed_at}
- **Original file**: {original_name}
- **Live URL**: {live_url}

## About

This repository was created automatically using the deploy-html-page script.
The HTML file is self-contained and ready to be served as a static website.
"""


def populate_workspace(
    workspace: Path,
    html_file: Path,
    repo_name: str,
    login: str,
    *,
    git: Git,
    branch: str,
) -> None:
    git.init(workspace, branch)
    git.configure_identity(workspace, COMMITTER_NAME, COMMITTER_EMAIL)

    shutil.copyfile(html_file, workspace / ENTRY_POINT)

    deployed_at = time.strftime("%Y-%m-%d %H:%M:%S %Z", time.localtime())
    readme = render_readme(repo_name, html_file.name, pages_url(login, repo_name), deployed_at)
    (workspace / "README.md").write_text(readme, encoding="utf-8")
    (workspace / ".gitignore").write_text(GITIGNORE_TEMPLATE, encoding="utf-8")


@contextmanager
def signals_ignored() -> Iterator[None]:
    """Ignore SIGINT and SIGTERM for the duration of the block (main thread only)."""
    if threading.current_thread() is not threading.main_thread():
        yield
        return
    previous = {signum: signal.signal(signum, signal.SIG_IGN) for signum in CLEANUP_SIGNALS}
    try:
        yield
    finally:
        for signum, handler in previous.items():
            signal.signal(signum, handler)


def remove_workspace(workspace: Path, reporter: Reporter) -> None:
    """Delete the workspace tree; a second interrupt cannot cut this short."""
    if workspace.is_dir():
        reporter.info("Cleaning up temporary files...")
        with signals_ignored():
            shutil.rmtree(workspace, ignore_errors=True)
        reporter.success("Cleanup completed")


@contextmanager
def deployment_workspace(
    html_file: Path,
    repo_name: str,
    login: str,
    *,
    git: Git,
    reporter: Reporter,
    work_root: Optional[Path] = None,
    branch: str = "main",
) -> Iterator[Path]:
    """Yield a committed-ready workspace and remove it on every exit path."""
    reporter.info("Creating temporary repository...")
    try:
        workspace = Path(
            tempfile.mkdtemp(
                prefix=f"{WORKSPACE_PREFIX}-{os.getpid()}-",
                dir=str(work_root) if work_root is not None else None,
            )
        )
    except OSError as exc:
        raise WorkspaceError(f"Could not create temporary directory: {exc}") from exc

    try:
        try:
            populate_workspace(workspace, html_file, repo_name, login, git=git, branch=branch)
        except CommandError as exc:
            raise WorkspaceError(f"Could not initialize git repository: {exc}") from exc
        except OSError as exc:
            raise WorkspaceError(f"Could not prepare repository files: {exc}") from exc
        reporter.success(f"Copied HTML file as {ENTRY_POINT}")
        reporter.success("Created repository files")
        yield workspace
    finally:
        remove_workspace(workspace, reporter)
