from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from users_api.app.core.config import Settings
from users_api.app.core.db import init_db
from users_api.app.main import create_app
from users_api.app.repositories.user_repository import UserRepository
from users_api.app.schemas.user import UserModificationRequest
from users_api.app.services.user_service import UserService

TODAY = date(2024, 1, 1)
MINIMUM_AGE = 18


def make_request(**overrides) -> UserModificationRequest:
    fields = {
        "email": "email@gmail.com",
        "first_name": "nadiia",
        "last_name": "rubant",
        "birth_date": date(2003, 7, 28),
        "address": "Kyiv, Khreshchatyk 1",
        "phone": "+380501234567",
    }
    fields.update(overrides)
    return UserModificationRequest(**fields)


@pytest.fixture()
def database_path(tmp_path: Path) -> str:
    path = str(tmp_path / "users.sqlite3")
    init_db(path)
    return path


@pytest.fixture()
def repository(database_path: str) -> UserRepository:
    return UserRepository(database_path)


@pytest.fixture()
def service(repository: UserRepository) -> UserService:
    return UserService(repository, minimum_age=MINIMUM_AGE, today=lambda: TODAY)


@pytest.fixture()
def client(tmp_path: Path):
    settings = Settings(database_url=str(tmp_path / "api.sqlite3"), minimum_age=MINIMUM_AGE)
    app = create_app(settings)
    with TestClient(app) as test_client:
        yield test_client
