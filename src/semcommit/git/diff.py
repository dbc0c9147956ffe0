"""Rendering of the index-to-working-tree diff."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from pygit2 import GitError as Pygit2GitError

from .utils import RepositoryAccessError

if TYPE_CHECKING:
	from pygit2 import Diff
	from pygit2.repository import Repository

logger = logging.getLogger(__name__)

# Line origins that make up the textual body of a unified patch
PATCH_ORIGINS = frozenset({" ", "-", "+"})


class DiffLineLike(Protocol):
	"""Subset of ``pygit2.DiffLine`` used for rendering."""

	origin: str
	raw_content: bytes


@dataclass
class GitDiff:
	"""Represents a rendered Git diff."""

	files: list[str]
	content: str
	is_staged: bool = False


def decode_line(raw: bytes) -> str:
	"""Decode line bytes as UTF-8, giving an empty string for undecodable content."""
	try:
		return raw.decode("utf-8")
	except UnicodeDecodeError:
		return ""


def render_line(line: DiffLineLike) -> str:
	"""
	Render one diff line with its origin marker.

	Args:
	    line: A diff line as produced by the diff engine.

	Returns:
	    The origin marker followed by the line content, or an empty string for
	    origins other than context, removal and addition.
	"""
	if line.origin not in PATCH_ORIGINS:
		return ""
	return f"{line.origin}{decode_line(line.raw_content)}"


def _index_to_workdir(repo: Repository) -> Diff:
	try:
		index = repo.index
		index.read()
		return index.diff_to_workdir()
	except (Pygit2GitError, KeyError, OSError) as e:
		msg = f"Failed to compute working tree diff: {e}"
		logger.exception(msg)
		raise RepositoryAccessError(msg) from e


def get_unstaged_diff(repo: Repository) -> GitDiff:
	"""
	Get the unstaged changes of the working tree as a GitDiff.

	The diff is taken between the current index and the files on disk, so it
	shows what ``git diff`` shows. Untracked files are not included.

	Args:
	    repo: Repository to read.

	Returns:
	    GitDiff with the changed paths and the rendered patch text. An unchanged
	    working tree gives empty content.

	Raises:
	    RepositoryAccessError: If the index cannot be read or the diff cannot be computed.
	"""
	diff = _index_to_workdir(repo)

	files: list[str] = []
	parts: list[str] = []
	try:
		for patch in diff:
			if patch is None:
				continue
			files.append(patch.delta.new_file.path)
			for hunk in patch.hunks:
				parts.extend(render_line(line) for line in hunk.lines)
	except Pygit2GitError as e:
		msg = f"Failed to render working tree diff: {e}"
		logger.exception(msg)
		raise RepositoryAccessError(msg) from e

	content = "".join(parts)
	logger.debug("Rendered diff for %d file(s), %d chars", len(files), len(content))
	return GitDiff(files=files, content=content, is_staged=False)


def extract_diff(repo: Repository) -> str:
	"""Return the unified diff text between the index and the working tree."""
	return get_unstaged_diff(repo).content
