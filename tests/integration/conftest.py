"""
Fixtures for integration tests.

Provides:
- Test client for the FastAPI app
- Personal codes for typical applicant profiles

The app runs with its real collaborators (python-stdnum backed personal
code validation), so the request bodies below use valid codes built by
the test factory. Birth years are chosen far from the age limits so the
results do not depend on the date the tests run.
"""

from datetime import date
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from loan_decision.main import app
from tests.factories import make_personal_code


# =============================================================================
# App Client Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Create a test client bound to the ASGI app."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# =============================================================================
# Applicant Fixtures
# =============================================================================

@pytest.fixture
def segment_1_code() -> str:
    """Adult applicant with credit modifier 100 (suffix 4567, Latvia)."""
    return make_personal_code(date(1990, 3, 10), "4567")


@pytest.fixture
def segment_3_code() -> str:
    """Adult applicant with credit modifier 1000 (suffix 8123, Lithuania)."""
    return make_personal_code(date(1985, 6, 1), "8123")


@pytest.fixture
def debt_code() -> str:
    """Adult applicant in the debt segment (suffix 0001)."""
    return make_personal_code(date(1990, 3, 10), "0001")


@pytest.fixture
def underage_code() -> str:
    """Applicant born in 2020, a minor until 2038."""
    return make_personal_code(date(2020, 2, 1), "4567", female=True)


@pytest.fixture
def elderly_code() -> str:
    """Applicant born in 1930 in Estonia, well past the life expectancy."""
    return make_personal_code(date(1930, 4, 1), "0995")


@pytest.fixture
def segment_1_request(segment_1_code: str) -> dict:
    """Request body that needs a longer period to be approved."""
    return {
        "personal_code": segment_1_code,
        "loan_amount": 4000,
        "loan_period": 12,
    }
