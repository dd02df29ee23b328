import sys
from pathlib import Path

import httpx
import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from config_store import MemoryConfigStore  # noqa: E402
from dhl import COUNTRY_API_URL, DHL_API_URL  # noqa: E402


def _base_url(request: httpx.Request) -> str:
    return f"{request.url.scheme}://{request.url.host}{request.url.path}"


class FakeUpstream:
    """Serves canned country-lookup and location-finder responses and records requests."""

    def __init__(
        self,
        country: dict | None = None,
        locations: dict | None = None,
        country_status: int = 200,
        locations_status: int = 200,
    ):
        self.country = country if country is not None else {"total_count": 1, "results": [{"iso2_code": "DE"}]}
        self.locations = locations if locations is not None else {"locations": []}
        self.country_status = country_status
        self.locations_status = locations_status
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        url = _base_url(request)
        if url == COUNTRY_API_URL:
            return httpx.Response(self.country_status, json=self.country)
        if url == DHL_API_URL:
            return httpx.Response(self.locations_status, json=self.locations)
        return httpx.Response(404, json={"detail": "unexpected url"})

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))

    def requests_to(self, url: str) -> list[httpx.Request]:
        return [r for r in self.requests if _base_url(r) == url]


def make_location(
    url: str = "/locations/AB12",
    name: str = "Packstation 101",
    days: tuple[str, ...] = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"),
    opens: str = "08:00:00",
    closes: str = "20:00:00",
) -> dict:
    """Location payload shaped like the DHL find-by-address response."""
    return {
        "url": url,
        "name": name,
        "place": {
            "address": {
                "countryCode": "DE",
                "postalCode": "53113",
                "addressLocality": "Bonn",
                "streetAddress": "Charles-de-Gaulle-Str. 20",
            },
        },
        "openingHours": [
            {"dayOfWeek": f"http://schema.org/{day}", "opens": opens, "closes": closes}
            for day in days
        ],
    }


@pytest.fixture
def upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest.fixture
def store() -> MemoryConfigStore:
    return MemoryConfigStore(values={"api_key": "demo-key"})
