from enum import Enum
from typing import Optional

from pydantic import BaseModel, model_validator

from prompt_improver_api.core.errors import ImprovementError, ImprovementErrorKind


class ImprovementMode(str, Enum):
    LOCAL = "local"
    REMOTE = "remote"


class ImprovementRequest(BaseModel):
    original_prompt: str
    api_key: Optional[str] = None


class ImprovementResult(BaseModel):
    """Uniform outcome shared by the local and remote improvement paths."""

    improved_prompt: str
    success: bool
    error: Optional[str] = None
    error_kind: Optional[ImprovementErrorKind] = None
    mode: Optional[ImprovementMode] = None

    @model_validator(mode="after")
    def _check_outcome(self) -> "ImprovementResult":
        if self.success:
            if not self.improved_prompt or self.error is not None or self.error_kind is not None:
                raise ValueError("successful results need text and no error")
        elif self.improved_prompt or not self.error or self.error_kind is None:
            raise ValueError("failed results need an error and no text")
        return self

    @classmethod
    def ok(cls, improved_prompt: str, mode: Optional[ImprovementMode] = None) -> "ImprovementResult":
        return cls(improved_prompt=improved_prompt, success=True, mode=mode)

    @classmethod
    def failure(
        cls,
        kind: ImprovementErrorKind,
        error: str,
        mode: Optional[ImprovementMode] = None,
    ) -> "ImprovementResult":
        return cls(improved_prompt="", success=False, error=error, error_kind=kind, mode=mode)

    @classmethod
    def from_error(cls, exc: ImprovementError, mode: Optional[ImprovementMode] = None) -> "ImprovementResult":
        return cls.failure(exc.kind, exc.message, mode=mode)


class ImproveRequest(BaseModel):
    prompt: Optional[str] = ""
    api_key: Optional[str] = None
    use_local_mode: bool = False


class NotificationMessage(BaseModel):
    title: str
    description: str


class ImproveResponse(BaseModel):
    improved_prompt: str
    success: bool
    mode: Optional[ImprovementMode] = None
    error: Optional[str] = None
    error_kind: Optional[ImprovementErrorKind] = None
    message: NotificationMessage


class HealthResponse(BaseModel):
    status: str
    service_name: str
    remote_model: str
