#!/usr/bin/env python3
"""Deploy a single HTML file as a new GitHub Pages site.

Steps:
- validate the HTML file (exists, .htm/.html, contains an <html> tag)
- check that `git` and `gh` are installed and `gh` is logged in
- generate a random repository name (page-xxxxxx)
- build a temporary repository with index.html, README.md and .gitignore
- create a public GitHub repository with `gh`, push, and enable Pages
- print the repository and Pages URLs, then remove the temporary directory

Usage:
  python3 deploy_html_page.py my-exported-file.html
  python3 deploy_html_page.py page.htm --yes --pages-delay 5

Auth:
- Uses the existing `gh` session. Run `gh auth login` first.

Exit codes:
  0 = deployed (Pages may still need to be enabled manually, see warnings)
  1 = validation, dependency, workspace or publish failure, or interrupted
"""

from __future__ import annotations

import argparse
import signal
import sys
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional

from console_output import Reporter
from deploy_errors import DependencyError, DeployError, DeployInterrupted, PublishError
from github_cli import CommandError, Git, GitHubCli, pages_url, repository_url
from html_input import validate_html_file
from page_workspace import deployment_workspace
from repo_name import generate_repo_name


COMMIT_MESSAGE = "Initial deployment of HTML file"
DEFAULT_BRANCH = "main"
DEFAULT_PAGES_PATH = "/"
DEFAULT_PAGES_DELAY = 2.0


@dataclass
class DeployConfig:
    html_file: Optional[str]
    base_dir: Path
    work_root: Optional[Path] = None
    branch: str = DEFAULT_BRANCH
    pages_path: str = DEFAULT_PAGES_PATH
    pages_delay: float = DEFAULT_PAGES_DELAY
    assume_yes: bool = False


@dataclass
class DeployResult:
    repo_name: str
    repo_url: str
    pages_url: str
    pages_enabled: bool


def check_dependencies(git: Git, gh: GitHubCli, reporter: Reporter) -> str:
    """Fail fast on missing tools or a logged-out `gh`; return the GitHub login."""
    reporter.info("Checking dependencies...")

    if not git.is_installed():
        raise DependencyError("Git is not installed. Please install Git first.")
    if not gh.is_installed():
        raise DependencyError(
            "GitHub CLI (gh) is not installed.\nPlease install it from: https://cli.github.com/"
        )
    if not gh.is_authenticated():
        raise DependencyError("GitHub CLI is not authenticated.\nPlease run: gh auth login")

    try:
        login = gh.current_user()
    except CommandError as exc:
        raise DependencyError(f"Could not determine the GitHub user: {exc}") from exc

    reporter.success("All dependencies are available")
    return login


def publish(
    workspace: Path,
    repo_name: str,
    login: str,
    *,
    git: Git,
    gh: GitHubCli,
    reporter: Reporter,
    config: DeployConfig,
    sleep: Callable[[float], None] = time.sleep,
) -> bool:
    """Commit, create and push the repository, then try to enable Pages.

    Returns whether Pages was enabled. Only the Pages step is allowed to fail
    quietly; everything before it raises PublishError.
    """
    reporter.info("Deploying to GitHub...")
    try:
        git.add_all(workspace)
        git.commit(workspace, COMMIT_MESSAGE)
    except CommandError as exc:
        raise PublishError(f"Failed to commit repository contents: {exc}") from exc

    reporter.info(f"Creating GitHub repository: {repo_name}")
    try:
        gh.create_repo(repo_name, workspace, public=True)
    except CommandError as exc:
        raise PublishError(f"Failed to create GitHub repository: {exc}") from exc
    reporter.success("Repository created and pushed to GitHub")

    reporter.info("Enabling GitHub Pages...")
    if config.pages_delay > 0:
        # Freshly created repositories can briefly reject the Pages call.
        sleep(config.pages_delay)

    if gh.enable_pages(login, repo_name, branch=config.branch, path=config.pages_path):
        reporter.success("GitHub Pages enabled")
        return True

    reporter.warning("Could not automatically enable GitHub Pages")
    reporter.warning("Please enable it manually in repository settings")
    return False


def run(
    config: DeployConfig,
    *,
    git: Git,
    gh: GitHubCli,
    reporter: Reporter,
    sleep: Callable[[float], None] = time.sleep,
) -> int:
    """Run the whole pipeline and return the process exit code.

    Every failure prints one `[ERROR]` message and returns 1; the workspace is
    removed before this returns, whether the run succeeded, failed or was
    interrupted.
    """
    reporter.banner()

    def confirm(warning: str) -> bool:
        if config.assume_yes:
            reporter.warning(warning)
            return True
        return reporter.confirm(warning)

    try:
        html_file = validate_html_file(config.html_file, base_dir=config.base_dir, confirm=confirm)
        login = check_dependencies(git, gh, reporter)

        repo_name = generate_repo_name()
        reporter.info(f"Generated repository name: {repo_name}")

        with deployment_workspace(
            html_file,
            repo_name,
            login,
            git=git,
            reporter=reporter,
            work_root=config.work_root,
            branch=config.branch,
        ) as workspace:
            enabled = publish(
                workspace,
                repo_name,
                login,
                git=git,
                gh=gh,
                reporter=reporter,
                config=config,
                sleep=sleep,
            )
            result = DeployResult(
                repo_name=repo_name,
                repo_url=repository_url(login, repo_name),
                pages_url=pages_url(login, repo_name),
                pages_enabled=enabled,
            )
            reporter.show_results(result.repo_name, result.repo_url, result.pages_url)
            if not result.pages_enabled:
                reporter.info(f"Pages settings: {result.repo_url}/settings/pages")
    except DeployError as exc:
        reporter.error(str(exc))
        return 1
    except (KeyboardInterrupt, DeployInterrupted):
        reporter.blank()
        reporter.error("Script interrupted")
        return 1

    reporter.success("All done! 🎉")
    return 0


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Create a new GitHub repository with a random name and publish an HTML file on GitHub Pages."
    )
    parser.add_argument(
        "html_file",
        nargs="?",
        help="HTML file to publish; it becomes index.html of the new repository.",
    )
    parser.add_argument(
        "-y",
        "--yes",
        action="store_true",
        help="Continue without asking when the file has no <html> tag.",
    )
    parser.add_argument(
        "--pages-delay",
        type=float,
        default=DEFAULT_PAGES_DELAY,
        help=f"Seconds to wait after pushing before enabling Pages (default: {DEFAULT_PAGES_DELAY:g}).",
    )
    parser.add_argument(
        "--work-dir",
        help="Parent directory for the temporary repository (default: system temp dir).",
    )
    return parser.parse_args(argv)


def _raise_interrupted(signum, frame) -> None:
    """SIGTERM handler: unwind the stack so the workspace scope can clean up."""
    raise DeployInterrupted(signal.Signals(signum).name)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    if args.pages_delay < 0:
        print("Error: --pages-delay must be zero or positive.", file=sys.stderr)
        return 2

    config = DeployConfig(
        html_file=args.html_file,
        base_dir=Path.cwd(),
        work_root=Path(args.work_dir) if args.work_dir else None,
        pages_delay=args.pages_delay,
        assume_yes=args.yes,
    )

    # SIGINT already arrives as KeyboardInterrupt.
    previous = signal.signal(signal.SIGTERM, _raise_interrupted)
    try:
        return run(config, git=Git(), gh=GitHubCli(), reporter=Reporter())
    finally:
        signal.signal(signal.SIGTERM, previous)


if __name__ == "__main__":
    raise SystemExit(main())
