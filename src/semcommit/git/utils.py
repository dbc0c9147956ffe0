"""Git repository access for semcommit."""

from __future__ import annotations

import logging
from pathlib import Path

from pygit2 import GitError as Pygit2GitError
from pygit2.enums import RepositoryOpenFlag
from pygit2.repository import Repository

logger = logging.getLogger(__name__)


class GitError(Exception):
	"""Base exception for Git-related errors."""


class RepositoryAccessError(GitError):
	"""Raised when the repository, its index or its diff cannot be read."""


class CommitCreationError(GitError):
	"""Raised when a new commit cannot be written."""


class GitRepoContext:
	"""Holds the pygit2 repository handle for a single invocation."""

	def __init__(self, path: Path | None = None, repo: Repository | None = None) -> None:
		"""
		Open the repository at ``path``.

		Args:
		    path: Working directory or git directory of the repository. Defaults to the
		        current directory. Parent directories are not searched.
		    repo: An already opened repository, used instead of opening ``path``.

		Raises:
		    RepositoryAccessError: If no repository can be opened.
		"""
		if repo is None:
			repo = open_repository(path)
		self.repo = repo
		self.repo_root = Path(repo.workdir) if repo.workdir else Path(repo.path)

	@property
	def branch(self) -> str:
		"""Current branch name, or an empty string when HEAD is detached or unborn."""
		if self.repo.head_is_unborn or self.repo.head_is_detached:
			return ""
		return self.repo.head.shorthand or ""


def open_repository(path: Path | None = None) -> Repository:
	"""
	Open the repository at exactly ``path``.

	Args:
	    path: Directory to open. Defaults to the current working directory.

	Returns:
	    The opened pygit2 repository.

	Raises:
	    RepositoryAccessError: If ``path`` is not itself an initialized repository.
	"""
	repo_path = path or Path.cwd()
	try:
		repo = Repository(str(repo_path), RepositoryOpenFlag.NO_SEARCH)
	except (Pygit2GitError, KeyError, OSError) as e:
		msg = f"Not a git repository: {repo_path} ({e})"
		logger.exception(msg)
		raise RepositoryAccessError(msg) from e
	logger.debug("Opened repository at %s", repo.path)
	return repo
