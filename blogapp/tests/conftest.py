import os
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# keep the exporter port free while tests import the app module
os.environ.setdefault('METRICS_ENABLED', 'false')

from blogapp.main import create_app  # noqa: E402
from blogapp.seed import seed_sample_data  # noqa: E402
from blogapp.storage import MemStorage  # noqa: E402


@pytest.fixture
def empty_store():
    return MemStorage()


@pytest.fixture
def store():
    s = MemStorage()
    seed_sample_data(s)
    return s


@pytest_asyncio.fixture
async def client(store):
    app = create_app(store, metrics=False)
    async with AsyncClient(transport=ASGITransport(app=app), base_url='http://test') as ac:
        yield ac
