"""Git operations for semcommit."""

from semcommit.git.commit import CommitWriter, commit
from semcommit.git.diff import GitDiff, extract_diff, get_unstaged_diff
from semcommit.git.utils import (
	CommitCreationError,
	GitError,
	GitRepoContext,
	RepositoryAccessError,
	open_repository,
)

__all__ = [
	"CommitCreationError",
	"CommitWriter",
	"GitDiff",
	"GitError",
	"GitRepoContext",
	"RepositoryAccessError",
	"commit",
	"extract_diff",
	"get_unstaged_diff",
	"open_repository",
]
