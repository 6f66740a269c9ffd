"""Repository URL parsing."""

from __future__ import annotations

import re

from ..models import RepoRef

_PATTERNS = (
    re.compile(r"github\.com/([^/\s]+)/([^/\s?#]+)"),
    re.compile(r"github\.com:([^/\s]+)/([^/\s?#]+)"),
)


class InvalidRepositoryURL(ValueError):
    """Raised when a string does not reference a GitHub repository."""


def parse_repo_url(url: str) -> RepoRef:
    """Extract the owner and repository name from an https or scp-style URL."""
    for pattern in _PATTERNS:
        match = pattern.search(url)
        if match:
            repo = match.group(2)
            if repo.endswith(".git"):
                repo = repo[: -len(".git")]
            if repo:
                return RepoRef(owner=match.group(1), repo=repo)
    raise InvalidRepositoryURL(f"Invalid GitHub URL: {url}")


__all__ = ["InvalidRepositoryURL", "parse_repo_url"]
