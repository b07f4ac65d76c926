import asyncio
import logging
from typing import Any, Callable, Dict, List, Optional

import openai
from openai import OpenAI

from prompt_improver_api.clients.perplexity_client import build_openai_client
from prompt_improver_api.core.constants import (
    GENERATION_CONFIG,
    PERPLEXITY_EXTRA_BODY,
    PROMPT_IMPROVEMENT_SYSTEM_PROMPT,
    REMOTE_MODEL,
    USER_PROMPT_TEMPLATE,
)
from prompt_improver_api.core.errors import (
    EmptyResponseError,
    ImprovementError,
    InvalidInputError,
    MissingCredentialError,
    TransportError,
    UnknownImprovementError,
)
from prompt_improver_api.schemas.improver import ImprovementMode, ImprovementRequest, ImprovementResult

logger = logging.getLogger(__name__)

ClientFactory = Callable[[Optional[str]], OpenAI]


def _extract_content(completion: Any) -> str:
    """Pull ``choices[0].message.content`` out of whatever the SDK handed back."""
    choices = getattr(completion, "choices", None)
    if not isinstance(choices, list) or not choices:
        return ""
    message = getattr(choices[0], "message", None)
    content = getattr(message, "content", None)
    if not isinstance(content, str):
        return ""
    return content.strip()


class RemoteImprover:
    """Improves prompts with a single Perplexity chat-completion call."""

    def __init__(self, client_factory: ClientFactory = build_openai_client) -> None:
        self.client_factory = client_factory

    @staticmethod
    def _build_messages(original_prompt: str) -> List[Dict[str, str]]:
        return [
            {"role": "system", "content": PROMPT_IMPROVEMENT_SYSTEM_PROMPT},
            {"role": "user", "content": USER_PROMPT_TEMPLATE.format(prompt=original_prompt)},
        ]

    def _request_completion(self, client: OpenAI, original_prompt: str) -> Any:
        try:
            return client.chat.completions.create(
                model=REMOTE_MODEL,
                messages=self._build_messages(original_prompt),
                extra_body=PERPLEXITY_EXTRA_BODY,
                **GENERATION_CONFIG,
            )
        except openai.APIStatusError as exc:
            raise TransportError(exc.status_code, exc.response.reason_phrase) from exc
        except (openai.APIResponseValidationError, ValueError) as exc:
            # Body was not the JSON document the SDK expected.
            logger.debug("Unparseable completion body: %s", exc)
            raise EmptyResponseError() from exc

    def _improve(self, request: ImprovementRequest) -> str:
        if not request.original_prompt.strip():
            raise InvalidInputError()
        if not request.api_key:
            raise MissingCredentialError()

        client = self.client_factory(request.api_key)
        completion = self._request_completion(client, request.original_prompt)
        improved = _extract_content(completion)
        if not improved:
            raise EmptyResponseError()
        return improved

    def improve(self, request: ImprovementRequest) -> ImprovementResult:
        """Run the remote path, folding every failure into the result."""
        try:
            improved = self._improve(request)
        except ImprovementError as exc:
            logger.error("Error improving prompt: %s", exc.message)
            return ImprovementResult.from_error(exc, mode=ImprovementMode.REMOTE)
        except Exception as exc:
            logger.error("Error improving prompt: %s", exc)
            return ImprovementResult.from_error(
                UnknownImprovementError(str(exc) or None),
                mode=ImprovementMode.REMOTE,
            )
        return ImprovementResult.ok(improved, mode=ImprovementMode.REMOTE)


async def improve_remote(
    request: ImprovementRequest,
    improver: Optional[RemoteImprover] = None,
) -> ImprovementResult:
    """Awaitable remote improvement; the blocking SDK call runs in a worker thread."""
    improver = improver or RemoteImprover()
    return await asyncio.to_thread(improver.improve, request)
