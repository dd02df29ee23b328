# finder.py
import logging

import httpx

from config_store import ConfigStore
from dhl import DhlApiError, fetch_locations, resolve_country
from filters import filter_locations
from models import SearchForm, SearchQuery, SearchResult

logger = logging.getLogger(__name__)

SETTINGS_PATH = "/admin/config/services/dhl-settings"

MSG_CONFIGURE = (
    "Please add you DHL api key at DHL api configuration ({url}) to access this application. "
    "If you do not have access to given link please contact administrator."
)
MSG_COUNTRY_NOT_FOUND = "System can not find country '{country}'. Please check if you have entered correct country."
MSG_SYSTEM_ERROR = "System encounter an issue. Please check logs for more information."
MSG_EMPTY = "No offices found of given location. Please change your search parameters to update results."


async def search_locations(
    query: SearchQuery,
    config: ConfigStore,
    client: httpx.AsyncClient,
) -> SearchResult:
    """
    Один поисковый запрос:
      1) нет api key        -> просим настроить ключ, внешних вызовов нет;
      2) не все поля        -> только пустая форма;
      3) поиск страны       -> "country not found", если совпадений нет;
      4) запрос в DHL       -> отфильтрованные локации или "no offices found".
    Ошибки обоих API логируются, пользователю уходит одно общее сообщение.
    """
    api_key = await config.get("api_key")
    if not api_key:
        return SearchResult(status="configuration_missing", message=MSG_CONFIGURE.format(url=SETTINGS_PATH))

    form = SearchForm(country=query.country, city=query.city, postCode=query.postalCode)
    if not query.complete:
        return SearchResult(status="awaiting_input", form=form)

    try:
        country_code = await resolve_country(client, query.country)
        if not country_code:
            return SearchResult(
                status="country_not_found",
                form=form,
                message=MSG_COUNTRY_NOT_FOUND.format(country=query.country),
            )
        raw = await fetch_locations(client, country_code, query.city, query.postalCode, api_key)
    except DhlApiError as e:
        logger.error(str(e))
        return SearchResult(status="error", form=form, message=MSG_SYSTEM_ERROR)

    locations = filter_locations(raw)
    logger.debug(f"DHL returned {len(raw)} locations for {country_code}, {len(locations)} kept")
    if not locations:
        return SearchResult(status="empty", form=form, message=MSG_EMPTY)
    return SearchResult(status="found", form=form, locations=locations)
