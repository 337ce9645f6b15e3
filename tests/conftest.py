"""
Pet Store API Test Fixtures
Shared fixtures for all test modules.
"""
import httpx
import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from petstore_api.auth import TokenProvider
from petstore_api.client import PetfinderClient
from petstore_api.config import Settings, reset_settings
from petstore_api.main import create_app

BASE_URL = "https://petfinder.test/v2"
TOKEN_URL = "https://petfinder.test/v2/oauth2/token"

SAMPLE_ANIMALS = [
    {
        "id": 101,
        "name": "Rex",
        "type": "Dog",
        "species": "Dog",
        "breeds": {"primary": "Labrador Retriever", "secondary": None, "mixed": False, "unknown": False},
        "age": "Young",
        "gender": "Male",
        "size": "Large",
        "status": "adoptable",
        "organization_id": "NJ333",
    },
    {
        "id": 102,
        "name": "Whiskers",
        "type": "Cat",
        "species": "Cat",
        "breeds": {"primary": "Domestic Short Hair", "secondary": None, "mixed": False, "unknown": False},
        "age": "Adult",
        "gender": "Female",
        "size": "Small",
        "status": "adoptable",
    },
]

SAMPLE_TYPES = [
    {"name": "Dog", "coats": ["Hairless", "Short"], "colors": ["Black"], "genders": ["Male", "Female"]},
    {"name": "Cat", "coats": ["Short"], "colors": ["Tabby"], "genders": ["Male", "Female"]},
]


class FakePetfinder:
    """
    httpx.MockTransport handler standing in for the Petfinder API.

    Token requests are answered with token-1, token-2, ... unless a response
    is queued. API requests are answered from per-path queues; the last
    queued response for a path repeats. Unknown paths get a 404.
    """

    def __init__(self):
        self.token_requests: list[httpx.Request] = []
        self.api_requests: list[httpx.Request] = []
        self.token_responses: list[httpx.Response] = []
        self._routes: dict[str, list[httpx.Response]] = {}
        self._issued = 0

    def queue(self, path: str, *responses: httpx.Response) -> None:
        self._routes.setdefault(f"/v2{path}", []).extend(responses)

    def queue_json(self, path: str, body, status_code: int = 200) -> None:
        self.queue(path, httpx.Response(status_code, json=body))

    def __call__(self, request: httpx.Request) -> httpx.Response:
        if request.url.path.endswith("/oauth2/token"):
            self.token_requests.append(request)
            if self.token_responses:
                return self.token_responses.pop(0)
            self._issued += 1
            return httpx.Response(
                200,
                json={"token_type": "Bearer", "expires_in": 3600, "access_token": f"token-{self._issued}"},
            )

        self.api_requests.append(request)
        responses = self._routes.get(request.url.path)
        if responses:
            queued = responses.pop(0) if len(responses) > 1 else responses[0]
            return httpx.Response(queued.status_code, headers=queued.headers, content=queued.content)
        return httpx.Response(404, json={"type": "about:blank", "status": 404, "title": "Not Found", "detail": "Not Found"})


# ============================================================
# Function-scoped fixtures
# ============================================================


@pytest.fixture(autouse=True)
def _reset_cached_settings():
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def settings() -> Settings:
    return Settings(
        api_key="test-key",
        api_secret="test-secret",
        base_url=BASE_URL,
        token_url=TOKEN_URL,
        _env_file=None,
    )


@pytest.fixture
def fake_petfinder() -> FakePetfinder:
    return FakePetfinder()


@pytest_asyncio.fixture
async def http_client(fake_petfinder):
    async with httpx.AsyncClient(transport=httpx.MockTransport(fake_petfinder)) as client:
        yield client


@pytest.fixture
def token_provider(settings, http_client) -> TokenProvider:
    return TokenProvider(settings, http_client)


@pytest.fixture
def petfinder_client(settings, token_provider, http_client) -> PetfinderClient:
    return PetfinderClient(settings, token_provider, http_client)


@pytest.fixture
def app(settings, fake_petfinder):
    return create_app(settings, transport=httpx.MockTransport(fake_petfinder))


@pytest.fixture
def api_client(app):
    with TestClient(app) as client:
        yield client


@pytest.fixture
def sample_animals() -> list[dict]:
    return [dict(animal) for animal in SAMPLE_ANIMALS]


@pytest.fixture
def sample_types() -> list[dict]:
    return [dict(animal_type) for animal_type in SAMPLE_TYPES]
