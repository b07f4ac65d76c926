from fastapi import APIRouter

from prompt_improver_api.schemas.improver import HealthResponse, ImproveRequest, ImproveResponse
from prompt_improver_api.services.prompt_improver_service import PromptImproverService

router = APIRouter(tags=["improver"])

improver_service = PromptImproverService()


@router.post("/improve", response_model=ImproveResponse)
async def improve_endpoint(request: ImproveRequest) -> ImproveResponse:
    """Improve prompts via REST."""
    return await improver_service.improve_prompt(request)


@router.get("/improver/health/raw", response_model=HealthResponse)
async def health_raw() -> HealthResponse:
    """Raw health payload for API clients."""
    return await improver_service.health()


@router.get("/improver/health")
async def health_proxy():
    """UI-friendly health in the widget's shape: {"ok": True, "service": {...}}."""
    health = await improver_service.health()
    return {"ok": True, "service": health.model_dump()}
