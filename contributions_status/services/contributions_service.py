import asyncio
import logging
from collections.abc import Awaitable
from collections.abc import Callable

import httpx

from contributions_status.clients.github_client import fetch_github_contribution_days
from contributions_status.clients.gitlab_client import fetch_gitlab_contribution_days
from contributions_status.models import DayRecord
from contributions_status.models import ProviderResult
from contributions_status.settings import Settings


logger = logging.getLogger(__name__)

GITHUB = "github"
GITLAB = "gitlab"


async def fetch_provider(
    provider: str, fetcher: Callable[[], Awaitable[list[DayRecord]]]
) -> ProviderResult:
    """Run one provider fetch and turn any failure into a failed result."""

    try:
        records = await fetcher()
    except httpx.HTTPStatusError as exc:
        logger.warning(
            "%s contributions request failed with status %s",
            provider,
            exc.response.status_code,
        )
        return ProviderResult.failure(
            provider, f"HTTP {exc.response.status_code} from {provider}"
        )
    except Exception as exc:
        logger.exception("Failed to fetch %s contributions", provider)
        return ProviderResult.failure(provider, str(exc) or type(exc).__name__)

    return ProviderResult.success(provider, records)


def records_or_empty(result: ProviderResult) -> list[DayRecord]:
    """A failed provider contributes no records; the graph still renders."""

    if not result.ok:
        return []
    return result.records


def _normalize_username(raw: str | None) -> str | None:
    if raw is None:
        return None
    username = raw.strip()
    return username or None


async def collect_contributions(
    github_username: str | None,
    gitlab_username: str | None,
    settings: Settings,
    transport: httpx.AsyncBaseTransport | None = None,
) -> tuple[ProviderResult, ProviderResult]:
    """Fetch both providers concurrently.

    A provider without a username yields a successful, empty result.
    """

    github_username = _normalize_username(github_username)
    gitlab_username = _normalize_username(gitlab_username)

    async with httpx.AsyncClient(
        timeout=settings.http_timeout_seconds,
        headers={"User-Agent": settings.user_agent},
        transport=transport,
    ) as client:

        async def fetch_github() -> ProviderResult:
            if github_username is None:
                return ProviderResult.success(GITHUB, [])
            return await fetch_provider(
                GITHUB,
                lambda: fetch_github_contribution_days(
                    username=github_username,
                    token=settings.github_token,
                    graphql_url=settings.github_graphql_url,
                    client=client,
                ),
            )

        async def fetch_gitlab() -> ProviderResult:
            if gitlab_username is None:
                return ProviderResult.success(GITLAB, [])
            return await fetch_provider(
                GITLAB,
                lambda: fetch_gitlab_contribution_days(
                    username=gitlab_username,
                    base_url=settings.gitlab_base_url,
                    client=client,
                ),
            )

        github_result, gitlab_result = await asyncio.gather(
            fetch_github(), fetch_gitlab()
        )

    return github_result, gitlab_result
