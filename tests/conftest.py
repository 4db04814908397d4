from __future__ import annotations

import io
from pathlib import Path
from typing import List, Optional, Tuple

import pytest
from rich.console import Console

from console_output import Reporter
from github_cli import CommandError


class FakeGit:
    def __init__(self, *, installed: bool = True, fail_on: Optional[str] = None) -> None:
        self.installed = installed
        self.fail_on = fail_on
        self.calls: List[Tuple[str, ...]] = []

    def _record(self, op: str, *args: str) -> None:
        self.calls.append((op, *args))
        if self.fail_on == op:
            raise CommandError(["git", op], 128, f"fatal: {op} failed")

    def is_installed(self) -> bool:
        return self.installed

    def init(self, path: Path, branch: str = "main") -> None:
        self._record("init", str(path), branch)

    def configure_identity(self, path: Path, name: str, email: str) -> None:
        self._record("config", name, email)

    def add_all(self, path: Path) -> None:
        self._record("add", str(path))

    def commit(self, path: Path, message: str) -> None:
        self._record("commit", message)


class FakeGitHubCli:
    def __init__(
        self,
        *,
        installed: bool = True,
        authenticated: bool = True,
        login: str = "octocat",
        create_error: Optional[str] = None,
        pages_ok: bool = True,
    ) -> None:
        self.installed = installed
        self.authenticated = authenticated
        self.login = login
        self.create_error = create_error
        self.pages_ok = pages_ok
        self.calls: List[Tuple[str, ...]] = []
        self.workspace_snapshot: Optional[List[str]] = None
        self.on_create = None

    def is_installed(self) -> bool:
        return self.installed

    def is_authenticated(self) -> bool:
        self.calls.append(("auth_status",))
        return self.authenticated

    def current_user(self) -> str:
        self.calls.append(("current_user",))
        return self.login

    def create_repo(self, name: str, source_dir: Path, *, public: bool = True) -> None:
        self.calls.append(("create_repo", name))
        self.workspace_snapshot = sorted(p.name for p in source_dir.iterdir())
        if self.on_create is not None:
            self.on_create(source_dir)
        if self.create_error:
            raise CommandError(["gh", "repo", "create", name], 1, self.create_error)

    def enable_pages(self, owner: str, repo: str, *, branch: str = "main", path: str = "/") -> bool:
        self.calls.append(("enable_pages", owner, repo, branch, path))
        return self.pages_ok


class CapturingReporter(Reporter):
    def __init__(self, answer: bool = False) -> None:
        self.buffer = io.StringIO()
        super().__init__(Console(file=self.buffer, width=200, color_system=None))
        self.answer = answer
        self.prompts: List[str] = []

    def confirm(self, warning: str) -> bool:
        self.warning(warning)
        self.prompts.append(warning)
        return self.answer

    @property
    def text(self) -> str:
        return self.buffer.getvalue()


@pytest.fixture
def reporter() -> CapturingReporter:
    return CapturingReporter()


@pytest.fixture
def html_file(tmp_path: Path) -> Path:
    path = tmp_path / "site.html"
    path.write_text("<html><body>Hi</body></html>", encoding="utf-8")
    return path


@pytest.fixture
def work_root(tmp_path: Path) -> Path:
    root = tmp_path / "work"
    root.mkdir()
    return root
