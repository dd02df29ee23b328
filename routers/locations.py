# routers/locations.py
import httpx
from fastapi import APIRouter, Depends, Query, Response

from config_store import ConfigStore, get_config_store
from dhl import get_http_client
from finder import search_locations
from models import SearchQuery, SearchResult

router = APIRouter(prefix="/locations", tags=["locations"])

# 424, чтобы сразу было видно, что не хватает конфигурации; 502 — сбой на стороне внешних API
STATUS_CODES = {
    "configuration_missing": 424,
    "error": 502,
}

@router.get("/search", response_model=SearchResult)
async def search(
    response: Response,
    country: str = Query("", description="Название страны на английском, например Germany"),
    city: str = Query(""),
    post_code: str = Query("", alias="postCode"),
    config: ConfigStore = Depends(get_config_store),
    client: httpx.AsyncClient = Depends(get_http_client),
):
    query = SearchQuery(country=country.strip(), city=city.strip(), postalCode=post_code.strip())
    result = await search_locations(query, config, client)
    response.status_code = STATUS_CODES.get(result.status, 200)
    return result
