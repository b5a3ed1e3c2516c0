import logging
import time
from typing import Any, Dict, Optional, Type, TypeVar

import httpx

from .envelope import Envelope
from .errors import AsanaTransportError

T = TypeVar("T")

BASE_URL = "https://app.asana.com/api/1.0"


class AsanaClient:
    """
    Synchronous HTTP client for the Asana REST API.
    - Attaches the personal access token as a bearer token on every request
    - GET only; returns the response body wrapped in an Envelope
    - Status codes are not interpreted: Asana reports failures inside the
      envelope, so every body goes to the parser
    """

    def __init__(
        self,
        token: str,
        *,
        base_url: str = BASE_URL,
        timeout_seconds: float = 10.0,
        logger: Optional[logging.Logger] = None,
        http: Optional[httpx.Client] = None,
        user_agent: Optional[str] = None,
    ):
        base_url = (base_url or "").rstrip("/")
        token = token or ""

        if not base_url:
            raise ValueError("base_url must be provided.")
        if not token:
            raise ValueError("token must be provided.")

        self.base_url = base_url
        self.timeout_seconds = timeout_seconds
        self.log = logger or logging.getLogger("asana_api.client")
        self._token = token

        headers = {
            "Accept": "application/json",
            "Authorization": f"Bearer {token}",
        }
        if user_agent:
            headers["User-Agent"] = user_agent

        self._owns_http = http is None
        self.http = http or httpx.Client(timeout=timeout_seconds)
        self._headers = headers

    @classmethod
    def from_env(cls, **kwargs) -> "AsanaClient":
        from .core.config import create_client_from_env

        return create_client_from_env(**kwargs)

    @property
    def token(self) -> str:
        return self._token

    def close(self) -> None:
        if self._owns_http:
            self.http.close()

    def __enter__(self) -> "AsanaClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def url_for(self, path: str) -> str:
        if path.startswith(("http://", "https://")):
            return path
        if not path.startswith("/"):
            path = "/" + path
        return self.base_url + path

    def get_text(
        self, path: str, *, params: Optional[Dict[str, Any]] = None
    ) -> str:
        """
        Perform an authenticated GET and return the raw body.
        Raises AsanaTransportError on network/timeout/other httpx failures.
        """
        url = self.url_for(path)
        start = time.perf_counter()

        try:
            resp = self.http.get(url, params=params, headers=self._headers)
        except httpx.TimeoutException as exc:
            raise AsanaTransportError(
                f"Timeout calling GET {url}: {exc}", method="GET", url=url
            ) from exc
        except httpx.HTTPError as exc:
            raise AsanaTransportError(
                f"HTTPX error calling GET {url}: {exc}", method="GET", url=url
            ) from exc

        duration_ms = int((time.perf_counter() - start) * 1000)
        # never log the token
        self.log.debug(
            "asana.request",
            extra={
                "method": "GET",
                "path": resp.request.url.raw_path.decode("ascii", "replace"),
                "status": resp.status_code,
                "duration_ms": duration_ms,
            },
        )
        return resp.text

    def get(self, path: str, *, params: Optional[Dict[str, Any]] = None) -> Envelope:
        return Envelope.parse(self.get_text(path, params=params))

    def get_model(
        self,
        model: Type[T],
        path: str,
        *,
        params: Optional[Dict[str, Any]] = None,
    ) -> T:
        """GET and extract `model`, raising AsanaApiErrors on reported errors."""
        return self.get(path, params=params).into(model)


__all__ = ["AsanaClient", "BASE_URL"]
