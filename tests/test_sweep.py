"""Tests for the expired verification/session sweep."""

import unittest
from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

from app.models import SessionRecord, Verification
from app.services.sweep import purge_expired
from tests.support import make_session_factory

NOW = datetime(2025, 3, 1, 12, 0, 0, tzinfo=timezone.utc)


class TestSweepMocked(unittest.TestCase):
    def test_returns_counts_and_commits(self) -> None:
        settings = MagicMock()
        settings.VERIFICATION_TTL_SECONDS = 180
        session = MagicMock()
        session.query.return_value.filter.return_value.delete.side_effect = [2, 1]
        self.assertEqual(purge_expired(session, settings, NOW), (2, 1))
        session.commit.assert_called_once()


class TestSweepAgainstSqlite(unittest.TestCase):
    def setUp(self) -> None:
        self.engine, SessionLocal = make_session_factory()
        self.db = SessionLocal()
        self.settings = MagicMock()
        self.settings.VERIFICATION_TTL_SECONDS = 180

    def tearDown(self) -> None:
        self.db.close()
        self.engine.dispose()

    def test_deletes_only_expired_rows(self) -> None:
        self.db.add_all(
            [
                Verification(id="old", email="a@x.com", code="AAAAAA", created_at=NOW - timedelta(seconds=181)),
                Verification(id="fresh", email="a@x.com", code="BBBBBB", created_at=NOW - timedelta(seconds=60)),
                SessionRecord(
                    token_hash="a" * 64,
                    user_id=1,
                    username="a@x.com",
                    role="user",
                    created_at=NOW - timedelta(days=8),
                    expires_at=NOW - timedelta(days=1),
                ),
                SessionRecord(
                    token_hash="b" * 64,
                    user_id=1,
                    username="a@x.com",
                    role="user",
                    created_at=NOW,
                    expires_at=NOW + timedelta(days=7),
                ),
            ]
        )
        self.db.commit()

        self.assertEqual(purge_expired(self.db, self.settings, NOW), (1, 1))
        self.assertEqual([v.id for v in self.db.query(Verification).all()], ["fresh"])
        self.assertEqual(self.db.query(SessionRecord).count(), 1)

        self.assertEqual(purge_expired(self.db, self.settings, NOW), (0, 0))


if __name__ == "__main__":
    unittest.main()
