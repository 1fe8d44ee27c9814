from datetime import date
from datetime import datetime

import pytest

from contributions_status.core.calendar import CALENDAR_TZ


@pytest.fixture
def fixed_now() -> datetime:
    """Noon on 2024-01-02 in the calendar reference."""

    return datetime(2024, 1, 2, 12, 0, tzinfo=CALENDAR_TZ)


@pytest.fixture
def fixed_today() -> date:
    return date(2024, 1, 2)


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"
