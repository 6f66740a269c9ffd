"""Git publishing utilities."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Callable, Iterable, Sequence

from ..logging import get_logger

COMMIT_TEMPLATE = """Add {title} project page

- Created {project_file}
- Added project card to {gallery_page}"""


class PublishError(RuntimeError):
    """Raised when the commit or every push attempt fails."""


class Publisher:
    """Stages the generated files, commits them and pushes to the remote."""

    def __init__(
        self,
        runner: Callable[..., str] | None = None,
        *,
        remote: str = "origin",
        branches: Sequence[str] = ("main", "master"),
    ) -> None:
        self._runner = runner or self._default_runner
        self.remote = remote
        self.branches = list(branches)
        self.logger = get_logger("publisher")

    def publish(
        self,
        repo_path: Path | str,
        project_file: Path | str,
        gallery_page: Path | str,
        *,
        title: str,
    ) -> str:
        """Commit the project page and gallery page, push, and return the branch."""
        repo = Path(repo_path)
        if not (repo / ".git").exists():
            raise PublishError(f"{repo} is not a git repository")

        project_rel = self._to_relative(repo, Path(project_file))
        gallery_rel = self._to_relative(repo, Path(gallery_page))

        self.stage(repo, [project_rel, gallery_rel])
        message = COMMIT_TEMPLATE.format(
            title=title,
            project_file=project_rel,
            gallery_page=gallery_rel,
        )
        self.commit(repo, message)
        return self.push(repo)

    def stage(self, repo: Path, paths: Iterable[str]) -> list[str]:
        """Stage each path; failures are logged and skipped."""
        staged: list[str] = []
        for rel in paths:
            try:
                self._run(["git", "add", rel], cwd=repo)
            except (OSError, subprocess.CalledProcessError) as exc:
                self.logger.warning("Could not stage %s: %s", rel, _describe(exc))
                continue
            self.logger.info("Staged %s", rel)
            staged.append(rel)
        return staged

    def commit(self, repo: Path, message: str) -> None:
        self.logger.info("Creating commit")
        try:
            self._run(["git", "commit", "-m", message], cwd=repo)
        except (OSError, subprocess.CalledProcessError) as exc:
            raise PublishError(f"git commit failed: {_describe(exc)}") from exc

    def push(self, repo: Path) -> str:
        """Push to each configured branch in turn until one succeeds."""
        last_error: Exception | None = None
        for branch in self.branches:
            self.logger.info("Pushing to %s/%s", self.remote, branch)
            try:
                self._run(["git", "push", self.remote, branch], cwd=repo)
            except (OSError, subprocess.CalledProcessError) as exc:
                self.logger.debug("Push to %s/%s failed: %s", self.remote, branch, _describe(exc))
                last_error = exc
                continue
            self.logger.info("Pushed to %s/%s", self.remote, branch)
            return branch
        tried = ", ".join(self.branches) or "(none)"
        detail = _describe(last_error) if last_error is not None else "no branches configured"
        raise PublishError(f"git push to {self.remote} failed for branches {tried}: {detail}")

    # ------------------------------------------------------------------
    # Helpers

    @staticmethod
    def _to_relative(repo: Path, file_path: Path) -> str:
        try:
            return file_path.relative_to(repo).as_posix()
        except ValueError:
            return file_path.as_posix()

    def _run(
        self,
        args: Iterable[str],
        *,
        cwd: Path,
        env: dict[str, str] | None = None,
        capture_output: bool = False,
    ) -> str:
        return self._runner(args, cwd=cwd, env=env, capture_output=capture_output)

    @staticmethod
    def _default_runner(
        args: Iterable[str],
        *,
        cwd: Path,
        env: dict[str, str] | None = None,
        capture_output: bool = False,
    ) -> str:
        completed = subprocess.run(
            list(args),
            cwd=str(cwd),
            env=env,
            check=True,
            text=True,
            capture_output=capture_output,
        )
        if capture_output:
            return completed.stdout
        return ""


def _describe(exc: BaseException) -> str:
    if isinstance(exc, subprocess.CalledProcessError):
        stderr = exc.stderr.strip() if isinstance(exc.stderr, str) else ""
        return stderr or f"exit code {exc.returncode}"
    return str(exc)


__all__ = ["COMMIT_TEMPLATE", "PublishError", "Publisher"]
