import json
import logging
from typing import Any, Mapping, Optional

import httpx

from sponsorblock import errors, util, wire
from sponsorblock.options import Options

logger = logging.getLogger(__name__)


def _query_value(value: Any) -> Any:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return json.dumps(list(value))
    return value


def encode_params(params: Optional[Mapping[str, Any]]) -> dict[str, Any]:
    """Drop unset values; send booleans as true/false and sequences as JSON arrays."""
    if not params:
        return {}
    return {k: _query_value(v) for k, v in params.items() if v is not None}


class Requester:
    """Shared HTTP plumbing for every method group of a client."""

    def __init__(self, user_id: str, options: Options, http: Optional[httpx.AsyncClient] = None):
        self.user_id = user_id
        self.options = options
        self._owns_http = http is None
        self._http = http or httpx.AsyncClient()

    async def request(
        self,
        method: str,
        path: str,
        params: Optional[Mapping[str, Any]] = None,
        body: Optional[Any] = None,
    ) -> httpx.Response:
        url = f"{self.options.base_url}{path}"
        resp = await self._http.request(
            method, url,
            params=encode_params(params),
            json=body,
            headers={"User-Agent": self.options.user_agent},
        )
        logger.debug("%s %s -> %s", method, path, resp.status_code)
        errors.status_check(resp)
        return resp

    async def get_json(self, path: str, params: Optional[Mapping[str, Any]] = None) -> util.Json:
        resp = await self.request("GET", path, params=params)
        return wire.JSON_BODY.validate_json(resp.content)

    async def get(self, path: str, params: Optional[Mapping[str, Any]] = None) -> None:
        await self.request("GET", path, params=params)

    async def post(
        self,
        path: str,
        params: Optional[Mapping[str, Any]] = None,
        body: Optional[Any] = None,
    ) -> None:
        await self.request("POST", path, params=params, body=body)

    async def aclose(self):
        if self._owns_http:
            await self._http.aclose()
