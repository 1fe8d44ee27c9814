from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

import httpx


async def fetch_gitlab_contribution_days(
    username: str,
    base_url: str,
    client: httpx.AsyncClient,
) -> list[dict[str, str | int]]:
    """Fetch contribution days from GitLab's public `calendar.json`.

    The endpoint needs no token and answers with `{"YYYY-MM-DD": count}`
    covering roughly the last year.
    """

    url = f"{base_url.rstrip('/')}/users/{quote(username, safe='')}/calendar.json"
    response = await client.get(url, headers={"Accept": "application/json"})
    response.raise_for_status()

    payload: Any = response.json()
    if not isinstance(payload, Mapping):
        raise ValueError("GitLab calendar response is invalid")

    days: list[dict[str, str | int]] = []
    for raw_date, raw_count in payload.items():
        if isinstance(raw_date, str) and isinstance(raw_count, int):
            days.append({"date": raw_date, "count": raw_count})

    days.sort(key=lambda day: str(day["date"]))
    return days
