"""Short.io link client."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import TracebackType
from typing import Any

import httpx

from linksync.contracts.client import LinkClient
from linksync.contracts.config import DEFAULT_BASE_URL
from linksync.contracts.exceptions import ServiceError
from linksync.contracts.link import CreateLinkInput, Domain, RemoteLink, UpdateLinkInput

_LOG = logging.getLogger(__name__)

PAGE_SIZE = 150


@dataclass
class LinkPageState:
    """Cursor state of one paginated catalog listing.

    Each consumed page appends its links (tagged with the resolved domain) and
    replaces the continuation token. The listing is done once a page carries no
    token.
    """

    domain: str
    domain_id: int
    token: str | None = None
    links: list[RemoteLink] = field(default_factory=list)
    pages: int = 0
    done: bool = False

    def params(self) -> dict[str, str | int]:
        params: dict[str, str | int] = {"domain_id": self.domain_id, "limit": PAGE_SIZE}
        if self.token:
            params["pageToken"] = self.token
        return params

    def consume(self, payload: Any) -> None:
        if not isinstance(payload, dict):
            raise ServiceError("Malformed link page", payload=payload)
        raw_links = payload.get("links") or []
        if not isinstance(raw_links, list):
            raise ServiceError("Missing/invalid list at key 'links'", payload=payload)
        for raw in raw_links:
            self.links.append(_link_from_payload(raw, domain=self.domain, domain_id=self.domain_id))
        self.pages += 1
        next_token = payload.get("nextPageToken")
        self.token = next_token if isinstance(next_token, str) and next_token else None
        self.done = self.token is None


class ShortioClient(LinkClient):
    def __init__(
        self,
        *,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._client = http_client
        self._owns_client = http_client is None
        self._domain_cache: dict[str, int] = {}

    async def __aenter__(self) -> ShortioClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                limits=httpx.Limits(max_connections=20, max_keepalive_connections=10),
                timeout=httpx.Timeout(30.0),
            )
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def list_domains(self) -> list[Domain]:
        try:
            payload = self._json(await self._request("GET", "/domains"))
            if not isinstance(payload, list):
                raise ServiceError("Missing/invalid domain list", payload=payload)
            domains = [_domain_from_payload(raw) for raw in payload]
        except ServiceError as exc:
            raise _wrap("Failed to fetch domains", exc) from exc

        self._domain_cache.clear()
        self._domain_cache.update({domain.hostname: domain.id for domain in domains})
        _LOG.debug("Cached %d domain(s)", len(domains))
        return domains

    async def resolve_domain_id(self, hostname: str) -> int:
        cached = self._domain_cache.get(hostname)
        if cached is not None:
            return cached

        await self.list_domains()
        domain_id = self._domain_cache.get(hostname)
        if domain_id is None:
            raise ServiceError(f"Domain not found: {hostname}")
        return domain_id

    async def fetch_all_links(self, domain: str) -> list[RemoteLink]:
        domain_id = await self.resolve_domain_id(domain)
        state = LinkPageState(domain=domain, domain_id=domain_id)
        while not state.done:
            try:
                response = await self._request("GET", "/links", params=state.params())
                state.consume(self._json(response))
            except ServiceError as exc:
                raise _wrap(f"Failed to fetch links for domain {domain}", exc) from exc
            _LOG.debug("Fetched page %d for %s (%d links so far)", state.pages, domain, len(state.links))
        return state.links

    async def create_link(self, input: CreateLinkInput) -> RemoteLink:
        body: dict[str, Any] = {"originalURL": input.original_url, "domain": input.domain, "path": input.path}
        if input.title is not None:
            body["title"] = input.title
        if input.tags is not None:
            body["tags"] = list(input.tags)

        try:
            data = self._json_object(await self._request("POST", "/links", json=body))
            domain_id = _optional_int(data, "DomainId")
            if domain_id is None:
                domain_id = self._domain_cache.get(input.domain, 0)
            return _link_from_payload(data, domain=input.domain, domain_id=domain_id)
        except ServiceError as exc:
            raise _wrap("Failed to create link", exc) from exc

    async def update_link(self, link_id: str, input: UpdateLinkInput) -> RemoteLink | None:
        # Empty strings and lists are sent as-is: that is how titles and tags get cleared.
        body: dict[str, Any] = {}
        if input.original_url is not None:
            body["originalURL"] = input.original_url
        if input.title is not None:
            body["title"] = input.title
        if input.tags is not None:
            body["tags"] = list(input.tags)

        try:
            response = await self._request("POST", f"/links/{link_id}", json=body)
        except ServiceError as exc:
            raise _wrap("Failed to update link", exc) from exc

        # The change is applied once the service answers 2xx; an unreadable body is logged, not raised.
        try:
            data = self._json_object(response)
            domain_id = _optional_int(data, "DomainId") or 0
            return _link_from_payload(data, domain=self._hostname_for(domain_id), domain_id=domain_id)
        except ServiceError as exc:
            _LOG.warning("Updated link %s but could not read the response: %s", link_id, exc.message)
            return None

    async def delete_link(self, link_id: str) -> None:
        try:
            await self._request("DELETE", f"/links/{link_id}")
        except ServiceError as exc:
            raise _wrap(f"Failed to delete link {link_id}", exc) from exc

    def _hostname_for(self, domain_id: int) -> str:
        for hostname, cached_id in self._domain_cache.items():
            if cached_id == domain_id:
                return hostname
        return ""

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": self._api_key,
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, str | int] | None = None,
        json: dict[str, Any] | None = None,
    ) -> httpx.Response:
        if self._client is None:
            raise ServiceError("Client is not initialized. Use 'async with'.")

        _LOG.debug("%s %s params=%s", method, path, params)
        try:
            response = await self._client.request(
                method,
                f"{self._base_url}{path}",
                params=params,
                json=json,
                headers=self._headers(),
            )
        except httpx.HTTPError as exc:
            raise ServiceError(f"{method} {path} failed: {exc}") from exc

        if response.is_success:
            return response

        payload = _error_payload(response)
        raise ServiceError(
            _error_message(payload, status_code=response.status_code),
            status_code=response.status_code,
            payload=payload,
        )

    @staticmethod
    def _json(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            raise ServiceError(
                "Invalid JSON in service response",
                status_code=response.status_code,
                payload=response.text,
            ) from exc

    @classmethod
    def _json_object(cls, response: httpx.Response) -> dict[str, Any]:
        data = cls._json(response)
        if not isinstance(data, dict):
            raise ServiceError("Service response is not an object", status_code=response.status_code, payload=data)
        return data


def _wrap(prefix: str, exc: ServiceError) -> ServiceError:
    return ServiceError(f"{prefix}: {exc.message}", status_code=exc.status_code, payload=exc.payload)


def _error_payload(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text


def _error_message(payload: Any, *, status_code: int) -> str:
    if isinstance(payload, dict):
        for key in ("message", "error"):
            value = payload.get(key)
            if isinstance(value, str) and value.strip():
                return value.strip()
        return f"Unknown error (HTTP {status_code})"
    if isinstance(payload, str) and payload.strip():
        return f"HTTP {status_code}: {payload.strip()}"
    return f"Unknown error (HTTP {status_code})"


def _domain_from_payload(raw: Any) -> Domain:
    if not isinstance(raw, dict):
        raise ServiceError("Domain entry must be an object", payload=raw)
    domain_id = _optional_int(raw, "id")
    hostname = raw.get("hostname")
    if domain_id is None or not isinstance(hostname, str):
        raise ServiceError("Domain entry requires integer 'id' and string 'hostname'", payload=raw)
    return Domain(id=domain_id, hostname=hostname)


def _link_from_payload(raw: Any, *, domain: str, domain_id: int) -> RemoteLink:
    if not isinstance(raw, dict):
        raise ServiceError("Link entry must be an object", payload=raw)
    link_id = raw.get("idString")
    if not isinstance(link_id, str):
        raise ServiceError("Missing/invalid string at key 'idString'", payload=raw)
    original_url = raw.get("originalURL")
    path = raw.get("path")
    if not isinstance(original_url, str) or not isinstance(path, str):
        raise ServiceError("Link entry requires string 'originalURL' and 'path'", payload=raw)

    title = raw.get("title")
    tags = raw.get("tags")
    return RemoteLink(
        id=link_id,
        original_url=original_url,
        path=path,
        domain=domain,
        domain_id=domain_id,
        title=title if isinstance(title, str) else None,
        tags=[str(tag) for tag in tags] if isinstance(tags, list) else None,
    )


def _optional_int(data: dict[str, Any], key: str) -> int | None:
    value = data.get(key)
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value
