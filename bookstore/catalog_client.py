"""HTTP client for the downstream book catalog service."""

from __future__ import annotations

import logging

import requests
from pydantic import ValidationError

from .exceptions import CatalogUnavailableError
from .schemas import BookIn

_LOGGER = logging.getLogger("bookstore.catalog")


class CatalogClient:
    """Fetch book records from `GET {base_url}/books/{id}`.

    Every failure (no base URL, network error, timeout, non-2xx status or
    an unusable body) is raised as `CatalogUnavailableError`.
    """

    def __init__(self, base_url: str, timeout: float = 2.0, session: requests.Session | None = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def fetch_book(self, book_id: int) -> BookIn:
        """Return the catalog's record for `book_id`, validated like API input."""
        if not self.base_url:
            raise CatalogUnavailableError("catalog url not configured")
        url = f"{self.base_url}/books/{book_id}"
        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except (requests.RequestException, ValueError) as exc:
            _LOGGER.warning("catalog lookup failed url=%s error=%s", url, exc)
            raise CatalogUnavailableError(str(exc)) from exc
        try:
            return BookIn.model_validate(data)
        except ValidationError as exc:
            _LOGGER.warning("catalog returned an invalid record url=%s errors=%s", url, exc.error_count())
            raise CatalogUnavailableError(f"catalog record invalid: {exc}") from exc
