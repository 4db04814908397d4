"""Thin wrappers around the `git` and `gh` command-line tools.

Every external call made by the deploy script goes through these classes, so
the orchestration can be exercised with fakes in tests.

Auth:
- Nothing here reads tokens. `gh` uses its own stored session (`gh auth login`).
"""

from __future__ import annotations

import shutil
import subprocess
from pathlib import Path
from typing import List, Optional, Sequence


GITHUB_WEB_ROOT = "https://github.com"


class CommandError(RuntimeError):
    def __init__(self, cmd: Sequence[str], returncode: Optional[int], stderr: str = "") -> None:
        self.cmd = list(cmd)
        self.returncode = returncode
        self.stderr = stderr.strip()
        detail = self.stderr or f"exit status {returncode}"
        super().__init__(f"cmd failed: {' '.join(self.cmd)}: {detail}")


def run_command(cmd: List[str], *, cwd: Optional[Path] = None) -> subprocess.CompletedProcess:
    """Run a command with captured text output; non-zero exits are returned, not raised."""
    try:
        return subprocess.run(
            cmd,
            cwd=str(cwd) if cwd is not None else None,
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError as exc:
        raise CommandError(cmd, None, str(exc)) from exc


def _checked(cmd: List[str], *, cwd: Optional[Path] = None) -> str:
    result = run_command(cmd, cwd=cwd)
    if result.returncode != 0:
        raise CommandError(cmd, result.returncode, result.stderr or result.stdout)
    return result.stdout


def repository_url(login: str, repo_name: str) -> str:
    return f"{GITHUB_WEB_ROOT}/{login}/{repo_name}"


def pages_url(login: str, repo_name: str) -> str:
    return f"https://{login}.github.io/{repo_name}/"


class Git:
    """Local repository operations used to prepare the page repository."""

    executable = "git"

    def is_installed(self) -> bool:
        """Return True if the executable is on PATH."""
        return shutil.which(self.executable) is not None

    def init(self, path: Path, branch: str = "main") -> None:
        """Initialize `path` as a repository whose first branch is `branch`."""
        _checked([self.executable, "init", "-q", f"--initial-branch={branch}"], cwd=path)

    def configure_identity(self, path: Path, name: str, email: str) -> None:
        """Set the committer name and email for this repository only."""
        _checked([self.executable, "config", "user.email", email], cwd=path)
        _checked([self.executable, "config", "user.name", name], cwd=path)

    def add_all(self, path: Path) -> None:
        """Stage every file in the working tree."""
        _checked([self.executable, "add", "."], cwd=path)

    def commit(self, path: Path, message: str) -> None:
        """Commit the staged files; raises CommandError if git refuses."""
        _checked([self.executable, "commit", "-q", "-m", message], cwd=path)


class GitHubCli:
    """GitHub operations, all run through the `gh` session of the current user."""

    executable = "gh"

    def is_installed(self) -> bool:
        """Return True if the executable is on PATH."""
        return shutil.which(self.executable) is not None

    def is_authenticated(self) -> bool:
        """Return True if `gh auth status` reports an active session."""
        try:
            result = run_command([self.executable, "auth", "status"])
        except CommandError:
            return False
        return result.returncode == 0

    def current_user(self) -> str:
        """Return the login of the account `gh` is authenticated as."""
        login = _checked([self.executable, "api", "user", "--jq", ".login"]).strip()
        if not login:
            raise CommandError([self.executable, "api", "user"], 0, "empty login in response")
        return login

    def create_repo(self, name: str, source_dir: Path, *, public: bool = True) -> None:
        """Create the remote repository from `source_dir` and push its commits."""
        visibility = "--public" if public else "--private"
        _checked(
            [self.executable, "repo", "create", name, visibility, "--source", ".", "--push"],
            cwd=source_dir,
        )

    def enable_pages(self, owner: str, repo: str, *, branch: str = "main", path: str = "/") -> bool:
        """Best-effort POST to the Pages endpoint; returns False instead of raising."""
        cmd = [
            self.executable,
            "api",
            f"repos/{owner}/{repo}/pages",
            "--method",
            "POST",
            "-f",
            f"source[branch]={branch}",
            "-f",
            f"source[path]={path}",
            "--silent",
        ]
        try:
            result = run_command(cmd)
        except CommandError:
            return False
        return result.returncode == 0
