"""HTTP tests for the course list and password change endpoints."""

from __future__ import annotations

from tests.support import ApiTestCase


class AccountApiContract:

    def setUp(self) -> None:
        super().setUp()
        self.signup("alice", "secret1")

    def test_courses_require_session(self) -> None:
        self.client.post("/api/auth/logout")
        response = self.client.get("/api/account/courses")
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json(), {"error": "unauthorized"})

    def test_courses_lifecycle(self) -> None:
        self.assertEqual(self.client.get("/api/account/courses").json(), {"courses": []})

        added = self.client.post("/api/account/courses", json={"name": " Biology "})
        self.assertEqual(added.status_code, 201)
        self.assertEqual(added.json(), {"courses": ["Biology"]})

        self.client.post("/api/account/courses", json={"name": "Algebra"})
        again = self.client.post("/api/account/courses", json={"name": "Biology"})
        self.assertEqual(again.json(), {"courses": ["Biology", "Algebra"]})

        removed = self.client.request("DELETE", "/api/account/courses", json={"name": "Biology"})
        self.assertEqual(removed.status_code, 200)
        self.assertEqual(removed.json(), {"courses": ["Algebra"]})
        self.assertEqual(self.client.get("/api/account/courses").json(), {"courses": ["Algebra"]})

    def test_empty_course_name(self) -> None:
        for body in ({"name": ""}, {"name": "   "}, {}):
            response = self.client.post("/api/account/courses", json=body)
            self.assertEqual(response.status_code, 400)
            self.assertEqual(response.json(), {"error": "empty_course"})

        response = self.client.request("DELETE", "/api/account/courses", json={"name": ""})
        self.assertEqual(response.json(), {"error": "empty_course"})

    def test_change_password(self) -> None:
        response = self.client.post(
            "/api/account/password", json={"oldPassword": "secret1", "newPassword": "secret99"}
        )

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"ok": True})
        self.assertEqual(self.login("alice", "secret1").status_code, 401)
        self.assertEqual(self.login("alice", "secret99").status_code, 200)

    def test_change_password_wrong_old_password(self) -> None:
        before = self.store.get_user("alice")["passwordHash"]

        response = self.client.post(
            "/api/account/password", json={"oldPassword": "nope", "newPassword": "secret99"}
        )

        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json(), {"error": "invalid_old_password"})
        self.assertEqual(self.store.get_user("alice")["passwordHash"], before)

    def test_change_password_too_short(self) -> None:
        response = self.client.post(
            "/api/account/password", json={"oldPassword": "secret1", "newPassword": "123"}
        )

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"error": "too_short"})

    def test_change_password_requires_session(self) -> None:
        self.client.post("/api/auth/logout")
        response = self.client.post(
            "/api/account/password", json={"oldPassword": "secret1", "newPassword": "secret99"}
        )
        self.assertEqual(response.status_code, 401)


class FileAccountApiTests(AccountApiContract, ApiTestCase):
    backend = "file"


class SqlAccountApiTests(AccountApiContract, ApiTestCase):
    backend = "sql"
