"""API test fixtures — FastAPI app behind an in-process httpx client.

Invariants:
    - Requests go through the real ASGI app, routing and error handlers included
    - No network socket is opened
"""

import pytest
from httpx import ASGITransport, AsyncClient

from greeter_api.main import app


@pytest.fixture
async def client():
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
