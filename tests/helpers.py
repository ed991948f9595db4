"""Shared test scaffolding: an app wired to a fresh in-memory database per test."""

import tempfile
import unittest
from pathlib import Path

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from portfolio.core.database import get_db
from portfolio.core.env_config import EnvConfigStore
from portfolio.core.security import create_access_token, hash_password
from portfolio.main import create_app
from portfolio.models import Base, User

ADMIN_PASSWORD = "admin123"
# Hashed once; bcrypt at 12 rounds is slow enough to matter per test.
ADMIN_PASSWORD_HASH = hash_password(ADMIN_PASSWORD)


def make_session_factory() -> sessionmaker:
    """New in-memory SQLite database shared by every session from the factory."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def add_user(
    db: Session,
    username: str = "admin",
    email: str | None = None,
    is_admin: bool = True,
) -> User:
    user = User(
        username=username,
        password_hash=ADMIN_PASSWORD_HASH,
        email=email or f"{username}@example.com",
        is_admin=is_admin,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


class StorageTestCase(unittest.TestCase):
    """Gives each test a session on its own empty database."""

    def setUp(self) -> None:
        self.SessionTesting = make_session_factory()
        self.db = self.SessionTesting()

    def tearDown(self) -> None:
        self.db.close()
        self.SessionTesting.kw["bind"].dispose()


class ApiTestCase(StorageTestCase):
    """TestClient against the real app with get_db pointed at the test database."""

    def setUp(self) -> None:
        super().setUp()
        self._tmp = tempfile.TemporaryDirectory()
        self.env_path = Path(self._tmp.name) / ".env"
        self.app = create_app()
        self.app.state.env_store = EnvConfigStore(self.env_path)

        def override_get_db():
            db = self.SessionTesting()
            try:
                yield db
            finally:
                db.close()

        self.app.dependency_overrides[get_db] = override_get_db
        self.client = TestClient(self.app)

    def tearDown(self) -> None:
        self.client.close()
        self._tmp.cleanup()
        super().tearDown()

    def admin_headers(self) -> dict[str, str]:
        admin = add_user(self.db, "admin", is_admin=True)
        return self.bearer(admin.id)

    def user_headers(self) -> dict[str, str]:
        user = add_user(self.db, "viewer", is_admin=False)
        return self.bearer(user.id)

    @staticmethod
    def bearer(user_id: int) -> dict[str, str]:
        return {"Authorization": f"Bearer {create_access_token(user_id)}"}
