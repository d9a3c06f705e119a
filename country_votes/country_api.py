# country_votes/country_api.py
import logging
from typing import Any, List, Optional

import httpx
from pydantic import TypeAdapter, ValidationError as PydanticValidationError

from .errors import UpstreamError
from .models.country_model import Country

logger = logging.getLogger(__name__)

DETAIL_FIELDS = "name,capital,region,subregion"

_countries_adapter = TypeAdapter(List[Country])


class CountryClient:
    """
    Thin wrapper over the REST Countries API.
    Every call goes to the network; nothing is cached and nothing is retried.
    """

    def __init__(self, base_url: str, client: httpx.Client):
        self.base_url = base_url if base_url.endswith("/") else base_url + "/"
        self._client = client

    def _get(self, path: str, params: Optional[dict] = None) -> Any:
        url = f"{self.base_url}{path}"
        logger.info(f"Fetching countries from {url} params={params}")
        try:
            response = self._client.get(url, params=params)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPError as e:
            logger.error(f"Country API request failed: {e}")
            raise UpstreamError(str(e))
        except ValueError as e:
            logger.error(f"Country API returned invalid JSON: {e}")
            raise UpstreamError(f"Invalid JSON from country API: {e}")

    def fetch_all(self) -> List[Any]:
        """Full upstream payload, passed through untouched."""
        data = self._get("all")
        if not isinstance(data, list):
            raise UpstreamError("Country API did not return a list")
        return data

    def fetch_details(self) -> List[Country]:
        data = self._get("all", params={"fields": DETAIL_FIELDS})
        try:
            return _countries_adapter.validate_python(data)
        except PydanticValidationError as e:
            logger.error(f"Unexpected country payload: {e}")
            raise UpstreamError(f"Unexpected country data: {e}")

    def fetch_names(self) -> List[str]:
        data = self._get("all", params={"fields": "name"})
        try:
            countries = _countries_adapter.validate_python(data)
        except PydanticValidationError as e:
            logger.error(f"Unexpected country names payload: {e}")
            raise UpstreamError(f"Unexpected country data: {e}")
        return sorted(c.name.common for c in countries)
