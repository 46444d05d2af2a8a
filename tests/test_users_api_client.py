from __future__ import annotations

from datetime import date
from unittest.mock import MagicMock

import pytest
import requests

from users_api_client import UsersAPI


def make_response(status_code: int, json_body=None, text: str = "") -> requests.Response:
    response = MagicMock(spec=requests.Response)
    response.status_code = status_code
    response.content = b"" if json_body is None else b"{}"
    response.text = text
    response.json.return_value = json_body
    if json_body is None and text:
        response.json.side_effect = ValueError("not json")
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(
            f"{status_code} error", response=response
        )
    return response


@pytest.fixture()
def session() -> MagicMock:
    return MagicMock(spec=requests.Session)


@pytest.fixture()
def api(session: MagicMock) -> UsersAPI:
    return UsersAPI(base_url="http://users.local/", session=session)


def test_find_by_birth_date_range_sends_iso_dates(api: UsersAPI, session: MagicMock) -> None:
    session.request.return_value = make_response(200, [{"id": "abc"}])

    users, error = api.find_by_birth_date_range(date(2003, 7, 28), date(2003, 7, 30))

    assert users == [{"id": "abc"}]
    assert error is None
    kwargs = session.request.call_args.kwargs
    assert kwargs["method"] == "GET"
    assert kwargs["url"] == "http://users.local/users"
    assert kwargs["params"] == {"fromDate": "2003-07-28", "toDate": "2003-07-30"}


def test_create_user_serializes_dates(api: UsersAPI, session: MagicMock) -> None:
    created = {"id": "abc", "email": "email@gmail.com"}
    session.request.return_value = make_response(201, created)

    user, error = api.create_user({"email": "email@gmail.com", "birthDate": date(2003, 7, 28)})

    assert (user, error) == (created, None)
    assert session.request.call_args.kwargs["json"] == {
        "email": "email@gmail.com",
        "birthDate": "2003-07-28",
    }


def test_update_user_reports_success_for_empty_body(api: UsersAPI, session: MagicMock) -> None:
    session.request.return_value = make_response(200)

    ok, error = api.update_user("abc", {"email": "email@gmail.com"})

    assert ok is True
    assert error is None
    assert session.request.call_args.kwargs["url"] == "http://users.local/users/abc"


def test_update_user_email_sends_email_body(api: UsersAPI, session: MagicMock) -> None:
    session.request.return_value = make_response(200)

    ok, _ = api.update_user_email("abc", "changed@gmail.com")

    assert ok is True
    kwargs = session.request.call_args.kwargs
    assert kwargs["method"] == "PUT"
    assert kwargs["url"] == "http://users.local/users/abc/email"
    assert kwargs["json"] == {"email": "changed@gmail.com"}


def test_api_error_message_is_taken_from_error_payload(api: UsersAPI, session: MagicMock) -> None:
    payload = {"error": "user with id abc is not found", "path": "/users/abc", "method": "DELETE"}
    session.request.return_value = make_response(404, payload)

    ok, error = api.delete_user("abc")

    assert ok is False
    assert error == {"status_code": 404, "message": "user with id abc is not found"}


def test_non_json_error_falls_back_to_text(api: UsersAPI, session: MagicMock) -> None:
    session.request.return_value = make_response(502, text="Bad Gateway")

    users, error = api.find_by_birth_date_range(date(2003, 7, 28), date(2003, 7, 30))

    assert users == []
    assert error == {"status_code": 502, "message": "Bad Gateway"}


def test_transport_failure_is_returned_as_error(api: UsersAPI, session: MagicMock) -> None:
    session.request.side_effect = requests.ConnectionError("connection refused")

    user, error = api.create_user({"email": "email@gmail.com"})

    assert user is None
    assert error == {"status_code": None, "message": "connection refused"}
