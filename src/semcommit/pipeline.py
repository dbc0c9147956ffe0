"""
Diff -> message -> commit pipeline.

The pipeline runs three stages once, in order: render the working tree
diff, ask the generation service for a commit message, then commit the
index with that message. A failure in any stage stops the run and leaves
the pipeline in the ``FAILED`` state; nothing is retried.

Note that the diff describes unstaged working tree changes while the commit
records the index. Changes must already be staged to end up in the commit.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

from semcommit.git.commit import CommitWriter
from semcommit.git.diff import get_unstaged_diff
from semcommit.git.utils import GitError, GitRepoContext
from semcommit.llm.client import DEFAULT_ENDPOINT, DEFAULT_MODEL, MessageGenerator, OpenAIMessageGenerator
from semcommit.llm.errors import GenerationError, LLMError
from semcommit.llm.prompts import CommitConvention, build_prompt

if TYPE_CHECKING:
	from pygit2.repository import Repository

logger = logging.getLogger(__name__)


class PipelineState(Enum):
	"""States of a pipeline run."""

	IDLE = "idle"
	DIFF_COMPUTED = "diff_computed"
	MESSAGE_GENERATED = "message_generated"
	COMMITTED = "committed"
	FAILED = "failed"


class PipelineStage(Enum):
	"""Stages a run can fail in."""

	DIFF = "diff"
	GENERATE = "generate"
	COMMIT = "commit"


class PipelineFailedError(Exception):
	"""Raised when a pipeline stage fails."""

	def __init__(self, stage: PipelineStage, cause: Exception) -> None:
		self.stage = stage
		self.cause = cause
		super().__init__(f"Pipeline failed during {stage.value} stage: {cause}")


@dataclass
class PipelineConfig:
	"""Process-wide settings passed explicitly into the pipeline."""

	repo_path: Path
	credential: str
	model: str = DEFAULT_MODEL
	endpoint: str = DEFAULT_ENDPOINT
	timeout: float | None = None
	convention: CommitConvention = field(default_factory=CommitConvention)
	allow_empty_message: bool = True


@dataclass
class PipelineResult:
	"""Outputs of a successful run."""

	diff: str
	message: str
	commit_id: str
	files: list[str] = field(default_factory=list)


class Pipeline:
	"""Runs the diff -> generate -> commit sequence once."""

	def __init__(
		self,
		config: PipelineConfig,
		generator: MessageGenerator | None = None,
		repo: Repository | None = None,
	) -> None:
		"""
		Initialize the pipeline.

		Args:
		    config: Explicit configuration for this run
		    generator: Message generator; defaults to the OpenAI-compatible client
		    repo: Already opened repository; defaults to opening ``config.repo_path``
		"""
		self.config = config
		self.generator = generator or OpenAIMessageGenerator(
			api_key=config.credential,
			model=config.model,
			endpoint=config.endpoint,
			timeout=config.timeout,
		)
		self.repo = repo
		self.state = PipelineState.IDLE
		self.failure: tuple[PipelineStage, Exception] | None = None
		self.message: str | None = None

	def _fail(self, stage: PipelineStage, cause: Exception) -> PipelineFailedError:
		self.state = PipelineState.FAILED
		self.failure = (stage, cause)
		logger.error("Pipeline failed during %s stage: %s", stage.value, cause)
		return PipelineFailedError(stage, cause)

	def run(self) -> PipelineResult:
		"""
		Execute the pipeline.

		Returns:
		    PipelineResult with the diff, generated message and new commit id.

		Raises:
		    PipelineFailedError: If any stage fails; ``stage`` tells which one.
		    RuntimeError: If the pipeline has already been run.
		"""
		if self.state is not PipelineState.IDLE:
			msg = f"Pipeline already ran (state: {self.state.value})"
			raise RuntimeError(msg)

		try:
			context = GitRepoContext(self.config.repo_path, repo=self.repo)
			self.repo = context.repo
			git_diff = get_unstaged_diff(context.repo)
		except GitError as e:
			raise self._fail(PipelineStage.DIFF, e) from e
		self.state = PipelineState.DIFF_COMPUTED
		if not git_diff.content:
			logger.warning("Working tree has no unstaged changes; generating a message for an empty diff")

		try:
			message = self.generator.generate(build_prompt(git_diff.content, self.config.convention))
			if not message:
				if not self.config.allow_empty_message:
					msg = "Generation service returned no commit message"
					raise GenerationError(msg)
				logger.warning("Generated commit message is empty; committing with an empty message")
		except LLMError as e:
			raise self._fail(PipelineStage.GENERATE, e) from e
		self.message = message
		self.state = PipelineState.MESSAGE_GENERATED

		logger.info("Committing index on branch %s", context.branch or "HEAD")
		try:
			commit_id = CommitWriter(context).commit(message)
		except GitError as e:
			raise self._fail(PipelineStage.COMMIT, e) from e
		self.state = PipelineState.COMMITTED

		return PipelineResult(diff=git_diff.content, message=message, commit_id=commit_id, files=git_diff.files)
