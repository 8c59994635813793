import sys, os, pytest, pytest_asyncio, httpx
from httpx import ASGITransport
from fastapi.testclient import TestClient

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from main import app


@pytest_asyncio.fixture
async def client():
    """Async-Testclient ohne Sitzungszustand."""
    transport = ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def session_client():
    """TestClient mit Cookie-Jar – für Abläufe über mehrere Requests."""
    with TestClient(app) as tc:
        yield tc
