"""
Shared fixtures: a fresh app on an in-memory sqlite database per test.
"""
import os

os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["DB_AUTO_CREATE"] = "false"
os.environ["LOG_FILE_ENABLE"] = "false"
os.environ["REQUEST_LOG_RECORD"] = "false"
os.environ["OAUTH_ENABLE"] = "true"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from apps.auth.token import AuthToken
from core.database import db_getter, engine_factory, create_tables
from main import create_app


def make_token(name: str, roles: list[str], user_id: str = "1") -> str:
    return AuthToken.create_token({"sub": name, "jti": user_id, "role": roles})


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture(scope="function")
def db_engine():
    """in-memory database, one shared connection"""
    return engine_factory("sqlite+aiosqlite://")


@pytest.fixture(scope="function")
def client(db_engine):
    """test client bound to db_engine"""
    factory = async_sessionmaker(bind=db_engine, autoflush=False, expire_on_commit=False, class_=AsyncSession)

    async def override_db_getter():
        async with factory() as session:
            async with session.begin():
                yield session

    app = create_app()
    app.dependency_overrides[db_getter] = override_db_getter
    with TestClient(app) as test_client:
        test_client.portal.call(create_tables, db_engine)
        yield test_client
        test_client.portal.call(db_engine.dispose)
    app.dependency_overrides.clear()


# ============== auth ==============

@pytest.fixture
def admin_headers():
    return bearer(make_token("root", ["admin"]))


@pytest.fixture
def student_headers():
    return bearer(make_token("alice", ["student"], user_id="2"))


# ============== data ==============

@pytest.fixture
def create_menu(client, admin_headers):
    """POST a menu and return its data, defaults filled in"""
    def _create(title: str, **fields) -> dict:
        body = {"title": title, "path": f"/{title.lower()}", "roles": ["admin"]}
        body.update(fields)
        response = client.post("/admin/menu/create", json=body, headers=admin_headers)
        assert response.status_code == 200, response.text
        return response.json()["data"]
    return _create
