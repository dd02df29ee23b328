# dhl.py
import os
from typing import List, Optional

import httpx
from dotenv import load_dotenv
from pydantic import ValidationError

from models import CountryCodeResult, RawLocation

load_dotenv()

COUNTRY_API_URL = os.getenv(
    "COUNTRY_API_URL",
    "https://public.opendatasoft.com/api/explore/v2.1/catalog/datasets/countries-codes/records",
).strip()
DHL_API_URL = os.getenv("DHL_API_URL", "https://api.dhl.com/location-finder/v1/find-by-address").strip()
DHL_TIMEOUT = float(os.getenv("DHL_TIMEOUT", "10"))


class DhlApiError(Exception):
    pass

class LookupFailure(DhlApiError):
    """Country code lookup failed (network, HTTP status or body)."""

class FetchFailure(DhlApiError):
    """DHL location finder call failed (network, HTTP status or body)."""


async def get_http_client():
    async with httpx.AsyncClient(timeout=httpx.Timeout(DHL_TIMEOUT)) as client:
        yield client


def _parse_country(data: dict) -> CountryCodeResult:
    total = int(data.get("total_count") or 0)
    results = data.get("results") or []
    iso2 = results[0].get("iso2_code") if total and results else None
    return CountryCodeResult(totalCount=total, iso2Code=iso2 or None)


async def lookup_country(client: httpx.AsyncClient, country: str) -> CountryCodeResult:
    params = {
        "select": "iso2_code",
        "where": f'label_en like "{country}"',
        "limit": 1,
    }
    try:
        resp = await client.get(COUNTRY_API_URL, params=params)
        resp.raise_for_status()
        return _parse_country(resp.json() or {})
    except httpx.HTTPError as e:
        raise LookupFailure(f"Country lookup failed: {e!s}") from e
    except (ValueError, AttributeError, TypeError) as e:
        raise LookupFailure(f"Country lookup returned an unexpected body: {e!s}") from e


async def resolve_country(client: httpx.AsyncClient, country: str) -> Optional[str]:
    """ISO2 code of the first country whose English label matches, or None."""
    return (await lookup_country(client, country)).iso2Code


async def fetch_locations(
    client: httpx.AsyncClient,
    country_code: str,
    city: str,
    postal_code: str,
    api_key: str,
) -> List[RawLocation]:
    params = {
        "countryCode": country_code,
        "addressLocality": city,
        "postalCode": postal_code,
    }
    headers = {
        "Accept": "application/json",
        "DHL-API-Key": api_key,
    }
    try:
        resp = await client.get(DHL_API_URL, params=params, headers=headers)
        resp.raise_for_status()
        data = resp.json() or {}
        return [RawLocation.model_validate(loc) for loc in (data.get("locations") or [])]
    except httpx.HTTPError as e:
        raise FetchFailure(f"DHL lookup failed: {e!s}") from e
    except ValidationError as e:
        raise FetchFailure(f"DHL returned malformed locations: {e!s}") from e
    except (ValueError, AttributeError, TypeError) as e:
        raise FetchFailure(f"DHL returned an unexpected body: {e!s}") from e
