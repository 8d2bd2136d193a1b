"""Tests for login, logout, /me and role guards."""

import unittest

from fastapi.testclient import TestClient

from app.main import app
from app.models import Role
from app.services.auth import authorize
from app.schemas.auth import CurrentUser
from app.core.errors import Forbidden, Unauthenticated
from tests.support import DEFAULT_PASSWORD, ApiTestCase


class TestLogin(ApiTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.user_id = self.create_user("user@x.com")

    def test_success_sets_http_only_cookie(self) -> None:
        resp = self.client.post(
            "/login", json={"username": "user@x.com", "password": DEFAULT_PASSWORD}
        )
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {"success": True})
        set_cookie = resp.headers["set-cookie"].lower()
        self.assertIn("sid=", set_cookie)
        self.assertIn("httponly", set_cookie)
        self.assertIn("samesite=lax", set_cookie)

    def test_username_is_trimmed(self) -> None:
        resp = self.client.post(
            "/login", json={"username": "  user@x.com ", "password": DEFAULT_PASSWORD}
        )
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(self.client.get("/me").json()["username"], "user@x.com")

    def test_wrong_password(self) -> None:
        resp = self.client.post("/login", json={"username": "user@x.com", "password": "nope-nope"})
        self.assertEqual(resp.status_code, 401)
        self.assertEqual(resp.json()["code"], "authentication_failed")
        self.assertNotIn("set-cookie", resp.headers)

    def test_unknown_user_same_error_as_wrong_password(self) -> None:
        unknown = self.client.post(
            "/login", json={"username": "ghost@x.com", "password": DEFAULT_PASSWORD}
        )
        wrong = self.client.post("/login", json={"username": "user@x.com", "password": "bad-pass"})
        self.assertEqual(unknown.status_code, 401)
        self.assertEqual(unknown.json(), wrong.json())

    def test_unverified_user_needs_verification(self) -> None:
        self.create_user("pending@x.com", verified=False)
        resp = self.client.post(
            "/login", json={"username": "pending@x.com", "password": DEFAULT_PASSWORD}
        )
        self.assertEqual(resp.status_code, 403)
        self.assertEqual(resp.json()["code"], "verification_required")

    def test_unverified_user_with_bad_password_is_401(self) -> None:
        self.create_user("pending@x.com", verified=False)
        resp = self.client.post("/login", json={"username": "pending@x.com", "password": "bad-pass"})
        self.assertEqual(resp.status_code, 401)


class TestSession(ApiTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.user_id = self.create_user("user@x.com")

    def test_me_returns_session_identity_uncached(self) -> None:
        client = self.client_for("user@x.com")
        resp = client.get("/me")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {"id": self.user_id, "username": "user@x.com", "role": "user"})
        self.assertEqual(resp.headers["cache-control"], "no-store")

    def test_me_without_session(self) -> None:
        resp = self.client.get("/me")
        self.assertEqual(resp.status_code, 401)
        self.assertEqual(resp.json()["code"], "unauthenticated")

    def test_me_with_forged_cookie(self) -> None:
        client = TestClient(app, cookies={"sid": "forged"})
        self.assertEqual(client.get("/me").status_code, 401)

    def test_logout_destroys_session(self) -> None:
        client = self.client_for("user@x.com")
        token = client.cookies.get("sid")
        resp = client.post("/logout")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {"success": True})
        self.assertEqual(client.get("/me").status_code, 401)

        replay = TestClient(app, cookies={"sid": token})
        self.assertEqual(replay.get("/me").status_code, 401)

    def test_logout_without_session_is_noop(self) -> None:
        resp = self.client.post("/logout")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {"success": True})

    def test_session_expires(self) -> None:
        client = self.client_for("user@x.com")
        self.clock.advance(3601)
        self.assertEqual(client.get("/me").status_code, 401)

    def test_session_keeps_role_snapshot(self) -> None:
        client = self.client_for("user@x.com")
        self.create_user("root@x.com", role=Role.superadmin.value)
        root = self.client_for("root@x.com")
        resp = root.put(f"/users/{self.user_id}/role")
        self.assertEqual(resp.json()["newRole"], "admin")

        self.assertEqual(client.get("/me").json()["role"], "user")
        self.assertEqual(self.client_for("user@x.com").get("/me").json()["role"], "admin")


class TestAuthorize(unittest.TestCase):
    def _principal(self, role: str) -> CurrentUser:
        return CurrentUser(id=1, username="u@x.com", role=role)

    def test_no_session(self) -> None:
        with self.assertRaises(Unauthenticated):
            authorize(None, {Role.admin, Role.superadmin})

    def test_exact_role_set(self) -> None:
        admin = self._principal("admin")
        self.assertIs(authorize(admin, {Role.admin, Role.superadmin}), admin)
        with self.assertRaises(Forbidden):
            authorize(admin, {Role.superadmin})

    def test_no_implicit_hierarchy(self) -> None:
        with self.assertRaises(Forbidden):
            authorize(self._principal("superadmin"), {Role.admin})

    def test_plain_strings_accepted(self) -> None:
        user = self._principal("user")
        self.assertIs(authorize(user, {"user"}), user)


if __name__ == "__main__":
    unittest.main()
