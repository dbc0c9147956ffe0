"""Client for the remote chat-completion service."""

from __future__ import annotations

import logging
from typing import Any, Protocol, runtime_checkable

import requests

from semcommit.utils.cli_utils import loading_spinner

from .errors import GenerationError
from .parser import parse_response
from .prompts import GenerationRequest, build_request

logger = logging.getLogger(__name__)

DEFAULT_ENDPOINT = "https://api.openai.com/v1/chat/completions"
DEFAULT_MODEL = "gpt-4o"


@runtime_checkable
class MessageGenerator(Protocol):
	"""Anything that can turn a prompt into a commit message."""

	def generate(self, prompt: str) -> str:
		"""Generate a commit message for ``prompt``."""
		...


def send_chat_request(
	request: GenerationRequest,
	api_key: str,
	endpoint: str = DEFAULT_ENDPOINT,
	timeout: float | None = None,
	session: requests.Session | None = None,
) -> Any:  # noqa: ANN401
	"""
	POST a chat-completion request and return the decoded JSON body.

	A single attempt is made. There is no retry and, unless ``timeout`` is
	given, no timeout beyond the transport default.

	Args:
	    request: Request body to send.
	    api_key: Bearer token for the service.
	    endpoint: Chat-completion URL.
	    timeout: Optional timeout in seconds.
	    session: Optional requests session, used instead of the module-level API.

	Returns:
	    The decoded JSON response.

	Raises:
	    GenerationError: On transport failure, a non-success status, or a body that is not JSON.
	"""
	headers = {
		"Content-Type": "application/json",
		"Authorization": f"Bearer {api_key}",
	}
	http = session or requests
	logger.debug("Sending chat-completion request to %s with model %s", endpoint, request.model)
	try:
		response = http.post(endpoint, json=request.model_dump(), headers=headers, timeout=timeout)
		response.raise_for_status()
	except requests.HTTPError as e:
		status = e.response.status_code if e.response is not None else "unknown"
		msg = f"Generation service returned HTTP {status}: {e}"
		logger.exception(msg)
		raise GenerationError(msg) from e
	except requests.RequestException as e:
		msg = f"Failed to reach generation service: {e}"
		logger.exception(msg)
		raise GenerationError(msg) from e

	try:
		return response.json()
	except ValueError as e:
		msg = f"Generation service returned a body that is not JSON: {e}"
		logger.exception(msg)
		raise GenerationError(msg) from e


def generate(
	credential: str,
	request: GenerationRequest,
	endpoint: str = DEFAULT_ENDPOINT,
	timeout: float | None = None,
	session: requests.Session | None = None,
) -> str:
	"""Send ``request`` and extract the generated commit message from the response."""
	response = send_chat_request(request, credential, endpoint=endpoint, timeout=timeout, session=session)
	return parse_response(response)


class OpenAIMessageGenerator:
	"""MessageGenerator backed by an OpenAI-compatible chat-completion endpoint."""

	def __init__(
		self,
		api_key: str,
		model: str = DEFAULT_MODEL,
		endpoint: str = DEFAULT_ENDPOINT,
		timeout: float | None = None,
		session: requests.Session | None = None,
	) -> None:
		"""
		Initialize the generator.

		Args:
		    api_key: Bearer token for the service
		    model: Model identifier sent with each request
		    endpoint: Chat-completion URL
		    timeout: Optional request timeout in seconds
		    session: Optional requests session
		"""
		self.api_key = api_key
		self.model = model
		self.endpoint = endpoint
		self.timeout = timeout
		self.session = session

	def generate(self, prompt: str) -> str:
		"""Generate a commit message for ``prompt`` with one round trip."""
		request = build_request(prompt, self.model)
		with loading_spinner("Generating commit message..."):
			return generate(
				self.api_key,
				request,
				endpoint=self.endpoint,
				timeout=self.timeout,
				session=self.session,
			)
