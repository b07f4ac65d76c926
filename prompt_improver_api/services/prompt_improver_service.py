import asyncio
import logging
from typing import Optional

from prompt_improver_api.core.config import get_settings
from prompt_improver_api.core.constants import (
    FAILURE_TITLE,
    LOCAL_SUCCESS_DESCRIPTION,
    REMOTE_SUCCESS_DESCRIPTION,
    SUCCESS_TITLE,
)
from prompt_improver_api.core.errors import InvalidInputError
from prompt_improver_api.schemas.improver import (
    HealthResponse,
    ImprovementMode,
    ImprovementRequest,
    ImprovementResult,
    ImproveRequest,
    ImproveResponse,
    NotificationMessage,
)
from prompt_improver_api.services.local_improver import improve_local
from prompt_improver_api.services.remote_improver import RemoteImprover

logger = logging.getLogger(__name__)


class PromptImproverService:
    """
    Chooses between the remote and local improvers for each request.

    The local path is taken when local mode is requested or the trimmed API
    key is empty; otherwise the remote path is called with the trimmed key.
    """

    def __init__(self, remote: Optional[RemoteImprover] = None) -> None:
        self.remote = remote or RemoteImprover()
        self.settings = get_settings()

    @staticmethod
    def select_mode(api_key: Optional[str], use_local_mode: bool) -> ImprovementMode:
        if use_local_mode or not (api_key or "").strip():
            return ImprovementMode.LOCAL
        return ImprovementMode.REMOTE

    def improve_sync(self, prompt: str, api_key: Optional[str] = None, use_local_mode: bool = False) -> ImprovementResult:
        if not (prompt or "").strip():
            return ImprovementResult.from_error(InvalidInputError())

        mode = self.select_mode(api_key, use_local_mode)
        logger.debug("Improving prompt in %s mode", mode.value)
        if mode is ImprovementMode.LOCAL:
            return ImprovementResult.ok(improve_local(prompt), mode=mode)

        request = ImprovementRequest(original_prompt=prompt, api_key=api_key.strip())
        return self.remote.improve(request)

    async def improve(self, prompt: str, api_key: Optional[str] = None, use_local_mode: bool = False) -> ImprovementResult:
        if self.select_mode(api_key, use_local_mode) is ImprovementMode.LOCAL:
            return self.improve_sync(prompt, api_key, use_local_mode)
        # Run the blocking OpenAI call in a thread to keep the event loop responsive.
        return await asyncio.to_thread(self.improve_sync, prompt, api_key, use_local_mode)

    @staticmethod
    def _notification(result: ImprovementResult) -> NotificationMessage:
        if not result.success:
            return NotificationMessage(title=FAILURE_TITLE, description=result.error or "Please try again later")
        if result.mode is ImprovementMode.LOCAL:
            return NotificationMessage(title=SUCCESS_TITLE, description=LOCAL_SUCCESS_DESCRIPTION)
        return NotificationMessage(title=SUCCESS_TITLE, description=REMOTE_SUCCESS_DESCRIPTION)

    async def improve_prompt(self, request: ImproveRequest) -> ImproveResponse:
        result = await self.improve(request.prompt or "", request.api_key, request.use_local_mode)
        if result.success:
            logger.info("Prompt improved in %s mode", result.mode.value)
        return ImproveResponse(
            improved_prompt=result.improved_prompt,
            success=result.success,
            mode=result.mode,
            error=result.error,
            error_kind=result.error_kind,
            message=self._notification(result),
        )

    async def health(self) -> HealthResponse:
        return HealthResponse(
            status="ok",
            service_name=self.settings.service_name,
            remote_model=self.settings.remote_model,
        )
