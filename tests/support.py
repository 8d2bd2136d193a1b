"""Shared fixtures for API tests: in-memory SQLite, fake clock and fake mail transport."""

import unittest
from datetime import datetime, timedelta, timezone

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.api.v1.deps import get_clock, get_mail_transport
from app.core.database import enable_sqlite_foreign_keys, get_db
from app.core.security import hash_password
from app.main import app
from app.models import Base, Role, User
from app.services.mailer import MailTransportError

DEFAULT_PASSWORD = "password123"


class FakeClock:
    """Callable clock that only moves when told to."""

    def __init__(self, start: datetime | None = None) -> None:
        self.current = start or datetime(2025, 3, 1, 12, 0, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.current

    def advance(self, seconds: float) -> None:
        self.current += timedelta(seconds=seconds)


class FakeMailTransport:
    """Records sent messages; raises MailTransportError when fail is set."""

    def __init__(self) -> None:
        self.sent: list[tuple[str, str, str]] = []
        self.fail = False

    def send(self, to: str, subject: str, text: str) -> None:
        if self.fail:
            raise MailTransportError("Mail provider unreachable: connection refused")
        self.sent.append((to, subject, text))

    def last_code(self) -> str:
        return self.sent[-1][2].rsplit(" ", 1)[-1]

    def close(self) -> None:
        pass


def make_session_factory():
    """Fresh in-memory database shared across threads (TestClient runs sync routes in a pool)."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    Base.metadata.create_all(engine)
    return engine, sessionmaker(bind=engine, autocommit=False, autoflush=False)


class ApiTestCase(unittest.TestCase):
    """Wires the app to a private database, clock and mailer for each test."""

    def setUp(self) -> None:
        self.engine, self.SessionLocal = make_session_factory()
        self.clock = FakeClock()
        self.mailer = FakeMailTransport()

        def override_get_db():
            db = self.SessionLocal()
            try:
                yield db
            finally:
                db.close()

        app.dependency_overrides[get_db] = override_get_db
        app.dependency_overrides[get_clock] = lambda: self.clock
        app.dependency_overrides[get_mail_transport] = lambda: self.mailer
        self.client = TestClient(app)

    def tearDown(self) -> None:
        app.dependency_overrides.clear()
        self.engine.dispose()

    def create_user(
        self,
        username: str,
        password: str = DEFAULT_PASSWORD,
        role: str = Role.user.value,
        verified: bool = True,
    ) -> int:
        db = self.SessionLocal()
        try:
            user = User(
                username=username,
                email=username,
                password_hash=hash_password(password),
                verified=verified,
                role=role,
            )
            db.add(user)
            db.commit()
            return user.id
        finally:
            db.close()

    def client_for(self, username: str, password: str = DEFAULT_PASSWORD) -> TestClient:
        """New client holding a session cookie for username."""
        client = TestClient(app)
        resp = client.post("/login", json={"username": username, "password": password})
        self.assertEqual(resp.status_code, 200, resp.text)
        return client

    def db_user(self, username: str) -> User | None:
        db = self.SessionLocal()
        try:
            return db.query(User).filter(User.username == username).first()
        finally:
            db.close()
