"""Users API client.

This module defines a small client wrapper around the Users API HTTP
surface.  It uses the ``requests`` library internally and exposes one
method per operation:

* :meth:`find_by_birth_date_range` – list users born within a date range.
* :meth:`create_user` – register a new user.
* :meth:`update_user` – replace every field of an existing user.
* :meth:`update_user_email` – change only the email of a user.
* :meth:`delete_user` – remove a user.

Every method returns a tuple ``(data, error)``.  On success ``error`` is
``None``.  On failure ``data`` is empty and ``error`` is a dictionary
with keys ``status_code`` and ``message``; ``message`` is taken from
the ``error`` field of the API's error payload when present.  Network
failures are reported the same way with ``status_code`` set to
``None``, so callers never need to catch ``requests`` exceptions.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


def _jsonable(payload: Dict[str, Any]) -> Dict[str, Any]:
    """Render ``date`` values as ISO strings so the payload is JSON safe."""
    return {key: value.isoformat() if isinstance(value, date) else value for key, value in payload.items()}


class UsersAPI:
    """Client for interacting with the Users API."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:8000``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/users``).
            params: Query parameters to include in the request.
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.  ``data`` is the parsed JSON
            response, or ``None`` for an empty body.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("error") or err_json.get("detail") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # User operations
    # ------------------------------------------------------------------
    def find_by_birth_date_range(
        self, from_date: date, to_date: date
    ) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve users born between two dates, both inclusive.

        Returns:
            A tuple ``(users, error)``.  ``users`` is empty on failure.
        """
        params = {"fromDate": from_date.isoformat(), "toDate": to_date.isoformat()}
        data, error = self._request("GET", "/users", params=params)
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    def create_user(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a new user.

        Args:
            payload: User fields with camelCase keys (``email``,
                ``firstName``, ``lastName``, ``birthDate`` and optionally
                ``address`` and ``phone``).  ``birthDate`` may be a
                :class:`datetime.date`.
        Returns:
            A tuple ``(user, error)``; ``user`` includes the generated ``id``.
        """
        return self._request("POST", "/users", json_body=_jsonable(payload))

    def update_user(self, user_id: Any, payload: Dict[str, Any]) -> Tuple[bool, Optional[Error]]:
        """Replace every field of a user.  Fields left out are cleared."""
        _, error = self._request("PUT", f"/users/{user_id}", json_body=_jsonable(payload))
        return error is None, error

    def update_user_email(self, user_id: Any, email: str) -> Tuple[bool, Optional[Error]]:
        _, error = self._request("PUT", f"/users/{user_id}/email", json_body={"email": email})
        return error is None, error

    def delete_user(self, user_id: Any) -> Tuple[bool, Optional[Error]]:
        _, error = self._request("DELETE", f"/users/{user_id}")
        return error is None, error
