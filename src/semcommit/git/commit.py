"""Creation of the generated commit."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pygit2 import Commit
from pygit2 import GitError as Pygit2GitError

from .utils import CommitCreationError

if TYPE_CHECKING:
	from pygit2.repository import Repository

	from .utils import GitRepoContext

logger = logging.getLogger(__name__)


def commit(repo: Repository, message: str) -> str:
	"""
	Create a commit on the current branch from the index.

	The tree is written from the current index, so only staged content is
	recorded, whatever the working tree holds. HEAD is advanced to the new
	commit, whose only parent is the previous HEAD commit.

	Args:
	    repo: Repository to commit into.
	    message: Commit message, used as given (it may be empty).

	Returns:
	    Hex id of the new commit.

	Raises:
	    CommitCreationError: If the tree cannot be written, HEAD is unborn or
	        unresolvable, no signature is configured, or the commit write fails.
	"""
	try:
		if repo.head_is_unborn:
			msg = "Cannot commit on an unborn HEAD. Please make an initial commit."
			logger.error(msg)
			raise CommitCreationError(msg)

		index = repo.index
		index.read()
		tree_id = index.write_tree()
		parent = repo.head.peel(Commit)
		signature = repo.default_signature

		commit_id = repo.create_commit(
			"HEAD",
			signature,
			signature,
			message,
			tree_id,
			[parent.id],
		)
	except CommitCreationError:
		raise
	except (Pygit2GitError, KeyError, ValueError, OSError) as e:
		msg = f"Failed to create commit: {e}"
		logger.exception(msg)
		raise CommitCreationError(msg) from e

	logger.info("Created commit %s with message: %s", commit_id, message)
	return str(commit_id)


class CommitWriter:
	"""Writes commits into the repository held by a GitRepoContext."""

	def __init__(self, context: GitRepoContext) -> None:
		self.context = context

	def commit(self, message: str) -> str:
		"""Create a commit with ``message``; see :func:`commit`."""
		return commit(self.context.repo, message)
