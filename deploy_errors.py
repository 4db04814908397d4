"""Error categories raised while deploying an HTML file to GitHub Pages."""

from __future__ import annotations


class DeployError(RuntimeError):
    """Base class for failures that abort a deployment."""


class UsageError(DeployError):
    pass


class InputValidationError(DeployError):
    pass


class DependencyError(DeployError):
    """Missing tool or logged-out `gh` session."""


class WorkspaceError(DeployError):
    pass


class PublishError(DeployError):
    """Commit, repository creation or push failed."""


class DeployInterrupted(Exception):
    """Raised from the SIGTERM handler so scoped cleanup still runs."""
