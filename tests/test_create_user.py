"""Tests for the create_user CLI."""

import unittest
from unittest.mock import patch

from app.models import User
from app.scripts import create_user
from tests.support import make_session_factory


class TestCreateUserCli(unittest.TestCase):
    def setUp(self) -> None:
        self.engine, self.SessionLocal = make_session_factory()
        patcher = patch.object(create_user, "SessionLocal", self.SessionLocal)
        patcher.start()
        self.addCleanup(patcher.stop)

    def tearDown(self) -> None:
        self.engine.dispose()

    def _users(self) -> list[User]:
        db = self.SessionLocal()
        try:
            return db.query(User).all()
        finally:
            db.close()

    def test_creates_superadmin(self) -> None:
        self.assertEqual(create_user.main(["owner@x.com", "owner-password", "superadmin"]), 0)
        users = self._users()
        self.assertEqual(len(users), 1)
        self.assertEqual(users[0].role, "superadmin")
        self.assertTrue(users[0].verified)

    def test_unverified_flag(self) -> None:
        self.assertEqual(create_user.main(["u@x.com", "user-password", "--unverified"]), 0)
        self.assertFalse(self._users()[0].verified)

    def test_duplicate_and_short_password(self) -> None:
        self.assertEqual(create_user.main(["u@x.com", "user-password"]), 0)
        self.assertEqual(create_user.main(["u@x.com", "user-password"]), 1)
        self.assertEqual(create_user.main(["v@x.com", "short"]), 1)
        self.assertEqual(len(self._users()), 1)


if __name__ == "__main__":
    unittest.main()
