"""Tests for idea listing, creation and deletion."""

import unittest

from app.models import Role
from tests.support import ApiTestCase


class IdeasApiTestCase(ApiTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.admin_id = self.create_user("admin@x.com", role=Role.admin.value)
        self.user_id = self.create_user("user@x.com")
        self.admin = self.client_for("admin@x.com")
        self.user = self.client_for("user@x.com")

    def post_idea(self, client, title: str = "Flying bicycles", description: str = "Wings.") -> None:
        resp = client.post("/ideas", json={"title": title, "description": description})
        self.assertEqual(resp.status_code, 200, resp.text)
        self.assertEqual(resp.json(), {"success": True})


class TestCreateAndList(IdeasApiTestCase):
    def test_created_idea_is_listed_with_author(self) -> None:
        self.post_idea(self.user)
        resp = self.user.get("/ideas")
        self.assertEqual(resp.status_code, 200)
        ideas = resp.json()
        self.assertEqual(len(ideas), 1)
        idea = ideas[0]
        self.assertEqual(idea["title"], "Flying bicycles")
        self.assertEqual(idea["description"], "Wings.")
        self.assertEqual(idea["userId"], self.user_id)
        self.assertEqual(idea["user"], {"username": "user@x.com"})
        self.assertEqual(idea["date"], "2025-03-01T12:00:00.000Z")

    def test_author_is_always_the_session_user(self) -> None:
        resp = self.user.post(
            "/ideas", json={"title": "t", "description": "d", "userId": self.admin_id}
        )
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(self.user.get("/ideas").json()[0]["userId"], self.user_id)

    def test_list_requires_session(self) -> None:
        resp = self.client.get("/ideas")
        self.assertEqual(resp.status_code, 401)
        self.assertEqual(resp.json()["code"], "unauthenticated")

    def test_create_requires_session(self) -> None:
        resp = self.client.post("/ideas", json={"title": "t", "description": "d"})
        self.assertEqual(resp.status_code, 401)

    def test_missing_title_is_validation_error(self) -> None:
        resp = self.user.post("/ideas", json={"description": "no title"})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["code"], "validation_error")

    def test_idea_survives_author_deletion(self) -> None:
        self.post_idea(self.user)
        self.assertEqual(self.admin.delete(f"/users/{self.user_id}").status_code, 200)
        ideas = self.admin.get("/ideas").json()
        self.assertEqual(len(ideas), 1)
        self.assertIsNone(ideas[0]["user"]["username"])
        self.assertIsNone(ideas[0]["userId"])

    def test_deleted_author_id_is_not_reused(self) -> None:
        self.post_idea(self.user)
        self.admin.delete(f"/users/{self.user_id}")
        new_id = self.create_user("newcomer@x.com")
        self.assertGreater(new_id, self.user_id)
        newcomer = self.client_for("newcomer@x.com")
        ideas = newcomer.get("/ideas").json()
        self.assertIsNone(ideas[0]["user"]["username"])
        self.assertNotEqual(ideas[0]["userId"], new_id)


class TestDeleteIdea(IdeasApiTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.post_idea(self.user)
        self.idea_id = self.user.get("/ideas").json()[0]["id"]

    def test_non_admin_forbidden_and_idea_kept(self) -> None:
        resp = self.user.delete(f"/ideas/{self.idea_id}")
        self.assertEqual(resp.status_code, 403)
        self.assertEqual(len(self.user.get("/ideas").json()), 1)

    def test_admin_deletes_any_idea(self) -> None:
        resp = self.admin.delete(f"/ideas/{self.idea_id}")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {"success": True})
        self.assertEqual(self.user.get("/ideas").json(), [])

    def test_no_session_unauthenticated(self) -> None:
        self.assertEqual(self.client.delete(f"/ideas/{self.idea_id}").status_code, 401)


if __name__ == "__main__":
    unittest.main()
