"""Elasticsearch REST client."""

from __future__ import annotations

import json
from typing import Any, Iterable, Mapping
from urllib.parse import quote

import requests

from RestaurantSearch.core.errors import SearchBackendError
from RestaurantSearch.utils.log import log

DEFAULT_URL = "http://localhost:9200"
DEFAULT_TIMEOUT = 10.0

HEADERS = {
    "User-Agent": "restaurant-search/0.1",
    "Accept": "application/json",
}


class ElasticsearchClient:
    """Low-level HTTP client for the Elasticsearch REST API.

    Every call is a single request. Transport errors and non-2xx responses
    are raised as `SearchBackendError`; nothing is retried.
    """

    def __init__(self, base_url: str = DEFAULT_URL, *, timeout: float = DEFAULT_TIMEOUT) -> None:
        """Initialize the client with a reusable HTTP session.

        Args:
            base_url: Cluster URL, e.g. `http://localhost:9200`.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session = requests.Session()
        self._session.headers.update(HEADERS)

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self._session.close()

    def search(
        self,
        index: str,
        body: Mapping[str, Any],
        *,
        page: int,
        per_page: int,
    ) -> dict[str, Any]:
        """Run a search request for one page.

        Args:
            index: Index name.
            body: Query DSL body (query and optional sort).
            page: 1-based page number.
            per_page: Page size.

        Returns:
            Decoded search response.
        """
        request_body = dict(body)
        request_body["from"] = (page - 1) * per_page
        request_body["size"] = per_page
        return self._request("POST", f"/{_segment(index)}/_search", json_body=request_body)

    def index_exists(self, index: str) -> bool:
        response = self._send("HEAD", f"/{_segment(index)}")
        if response.status_code == 404:
            return False
        _raise_for_status(response, "HEAD", index)
        return True

    def create_index(self, index: str, body: Mapping[str, Any]) -> dict[str, Any]:
        return self._request("PUT", f"/{_segment(index)}", json_body=dict(body))

    def delete_index(self, index: str) -> dict[str, Any]:
        return self._request("DELETE", f"/{_segment(index)}")

    def refresh(self, index: str) -> dict[str, Any]:
        return self._request("POST", f"/{_segment(index)}/_refresh")

    def index_document(self, index: str, doc_id: str, document: Mapping[str, Any]) -> dict[str, Any]:
        """Create or replace one document."""
        return self._request("PUT", f"/{_segment(index)}/_doc/{_segment(doc_id)}", json_body=dict(document))

    def delete_document(self, index: str, doc_id: str) -> dict[str, Any]:
        return self._request("DELETE", f"/{_segment(index)}/_doc/{_segment(doc_id)}")

    def bulk_index(self, index: str, documents: Iterable[tuple[str, Mapping[str, Any]]]) -> dict[str, Any]:
        """Index documents with a single `_bulk` request.

        Args:
            index: Target index name.
            documents: Pairs of (document id, document body).

        Returns:
            Decoded bulk response.

        Raises:
            SearchBackendError: If the request fails or any item is rejected.
        """
        lines: list[str] = []
        for doc_id, document in documents:
            lines.append(json.dumps({"index": {"_index": index, "_id": doc_id}}))
            lines.append(json.dumps(dict(document), ensure_ascii=False))
        if not lines:
            return {"errors": False, "items": []}
        payload = ("\n".join(lines) + "\n").encode("utf-8")

        result = self._request(
            "POST",
            "/_bulk",
            data=payload,
            headers={"Content-Type": "application/x-ndjson"},
        )
        if result.get("errors"):
            failed = [item for item in result.get("items", []) if _bulk_item_failed(item)]
            raise SearchBackendError(
                f"Bulk indexing rejected {len(failed)} document(s) in {index}",
                payload=failed,
            )
        return result

    def _request(
        self,
        method: str,
        path: str,
        *,
        json_body: Mapping[str, Any] | None = None,
        data: bytes | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> dict[str, Any]:
        response = self._send(method, path, json_body=json_body, data=data, headers=headers)
        _raise_for_status(response, method, path)
        try:
            payload = response.json()
        except ValueError as error:
            raise SearchBackendError(
                f"Elasticsearch returned invalid JSON for {method} {path}",
                status=response.status_code,
            ) from error
        if not isinstance(payload, dict):
            raise SearchBackendError(
                f"Elasticsearch returned unexpected payload for {method} {path}",
                status=response.status_code,
                payload=payload,
            )
        return payload

    def _send(
        self,
        method: str,
        path: str,
        *,
        json_body: Mapping[str, Any] | None = None,
        data: bytes | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> requests.Response:
        url = self.base_url + path
        log.debug("Elasticsearch request: %s %s", method, url)
        try:
            return self._session.request(
                method,
                url,
                json=json_body,
                data=data,
                headers=dict(headers) if headers else None,
                timeout=self.timeout,
            )
        except requests.RequestException as error:
            raise SearchBackendError(f"Elasticsearch request failed: {method} {url}: {error}") from error


def _raise_for_status(response: requests.Response, method: str, target: str) -> None:
    if response.ok:
        return
    try:
        payload: Any = response.json()
    except ValueError:
        payload = response.text
    reason = _error_reason(payload)
    raise SearchBackendError(
        f"Elasticsearch {method} {target} failed with HTTP {response.status_code}: {reason}",
        status=response.status_code,
        payload=payload,
    )


def _error_reason(payload: Any) -> str:
    if isinstance(payload, dict):
        error = payload.get("error")
        if isinstance(error, dict):
            return str(error.get("reason") or error.get("type") or error)
        if error:
            return str(error)
    text = str(payload or "").strip()
    return text[:200] if text else "no response body"


def _bulk_item_failed(item: Any) -> bool:
    if not isinstance(item, dict):
        return False
    return any(isinstance(action, dict) and "error" in action for action in item.values())


def _segment(value: str) -> str:
    return quote(str(value), safe="")
