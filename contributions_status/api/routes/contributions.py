import logging

from fastapi import APIRouter
from fastapi import Header
from fastapi import HTTPException
from fastapi import Query
from fastapi import Request
from fastapi import Response
from starlette.concurrency import run_in_threadpool

from contributions_status.api.schemas.contributions import HealthResponse
from contributions_status.api.schemas.contributions import MessageResponse
from contributions_status.services.contributions_service import collect_contributions
from contributions_status.services.contributions_service import records_or_empty
from contributions_status.services.graph_service import generate_graph
from contributions_status.settings import Settings


logger = logging.getLogger(__name__)

router = APIRouter()
settings = Settings()

CACHE_CONTROL = "public, max-age=3600, must-revalidate"


def build_etag(deployment_id: str, image: bytes) -> str:
    """ETag changes with each deployment and with the rendered image size."""

    return f'"{deployment_id}-{len(image)}"'


@router.get("/")
async def root() -> MessageResponse:
    """Return the probe message polled by the status page."""

    return MessageResponse(message="Backend API is running")


@router.get("/health/live")
def health_live() -> HealthResponse:
    """Return liveness probe response for health checks."""

    return HealthResponse(status="ok")


@router.get("/api/contributions")
async def get_contributions_graph(
    request: Request,
    github: str | None = Query(default=None),
    gitlab: str | None = Query(default=None),
    theme: str | None = Query(default=None),
    if_none_match: str | None = Header(default=None),
) -> Response:
    """Return the combined GitHub/GitLab contribution graph as PNG."""

    if not (github and github.strip()) and not (gitlab and gitlab.strip()):
        raise HTTPException(
            status_code=400,
            detail="At least one of github or gitlab username is required",
        )

    github_result, gitlab_result = await collect_contributions(
        github_username=github,
        gitlab_username=gitlab,
        settings=settings,
    )

    font = getattr(request.app.state, "graph_font", None)
    try:
        image = await run_in_threadpool(
            generate_graph,
            records_or_empty(github_result),
            records_or_empty(gitlab_result),
            theme,
            font.font if font is not None else None,
        )
    except Exception as exc:
        logger.exception("Failed to generate contribution graph")
        raise HTTPException(
            status_code=500, detail="Failed to generate contribution graph"
        ) from exc

    etag = build_etag(settings.deployment_id, image)
    if if_none_match == etag:
        return Response(status_code=304, headers={"ETag": etag})

    return Response(
        content=image,
        media_type="image/png",
        headers={"Cache-Control": CACHE_CONTROL, "ETag": etag},
    )
