from __future__ import annotations

import unittest
from unittest import mock

from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from backend.factory import create_app
from tests.helpers import make_engine


def _broken_progress_insert(session, project_id, candidate_id):
    session.flush()
    raise OperationalError("INSERT INTO progress", {}, Exception("connection lost"))


class ApiTestCase(unittest.TestCase):
    production = False

    def setUp(self):
        self.engine = make_engine()
        self.app = create_app(self.engine, production=self.production)
        self.client = TestClient(self.app)
        self.client.__enter__()
        self.client.post("/api/users", json={"uid": "u1", "displayName": "Ada"})

    def tearDown(self):
        self.client.__exit__(None, None, None)

    def _create(self, **overrides):
        body = {"name": "X", "description": "d", "deadline": "2099-01-01"}
        body.update(overrides)
        response = self.client.post("/api/projects", json=body)
        self.assertEqual(response.status_code, 200, response.text)
        return response.json()


class ScenarioTests(ApiTestCase):
    def test_create_accept_complete_leaderboard(self):
        project = self._create()
        self.assertEqual(project["status"], "Pending")
        self.assertEqual(project["deadline"], "2099-01-01T00:00:00Z")

        response = self.client.post(
            "/api/projects/accept", json={"project_id": project["id"], "candidate_id": "u1"}
        )
        self.assertEqual(response.json(), {"message": "Project accepted successfully"})

        (listed,) = self.client.get("/api/projects", params={"userId": "u1"}).json()
        self.assertEqual(listed["status"], "Accepted")
        self.assertEqual((listed["progress"], listed["score"]), (0, 0))
        self.assertTrue(listed["is_accepted"])

        response = self.client.post(
            "/api/progress/update",
            json={"project_id": project["id"], "candidate_id": "u1", "progress": 100, "score": 80},
        )
        self.assertEqual(response.status_code, 200)
        row = response.json()
        self.assertEqual((row["progress"], row["score"]), (100, 80))

        board = self.client.get("/api/leaderboard").json()
        entry = next(item for item in board if item["candidate_id"] == "u1")
        self.assertGreaterEqual(entry["total_score"], 80)
        self.assertEqual(entry["display_name"], "Ada")

        for user_id in ("u1", "someone-else"):
            listing = self.client.get("/api/projects", params={"userId": user_id}).json()
            self.assertEqual(listing, [])

    def test_listing_without_user_id(self):
        self._create()
        (item,) = self.client.get("/api/projects").json()
        self.assertFalse(item["is_accepted"])

    def test_samples_seed_three_projects(self):
        response = self.client.post("/api/projects/samples")
        self.assertEqual(response.json()["message"], "Sample projects added successfully")
        self.assertEqual(len(self.client.get("/api/projects").json()), 3)

    def test_user_upsert_response(self):
        response = self.client.post(
            "/api/users",
            json={"uid": "u1", "email": "a@b.c", "displayName": "Ada L", "photoURL": None},
        )
        body = response.json()
        self.assertEqual(body["message"], "User data saved")
        self.assertEqual(body["user"]["display_name"], "Ada L")

    def test_system_routes(self):
        self.assertEqual(self.client.get("/test").json(), {"message": "Server is working!"})
        self.assertEqual(self.client.get("/health").json(), {"ok": True})


class ClientErrorTests(ApiTestCase):
    def test_missing_fields_are_bad_requests(self):
        cases = [
            ("/api/projects", {"description": "d", "deadline": "2099-01-01"}),
            ("/api/projects", {"name": "X"}),
            ("/api/projects", {"name": "X", "deadline": "soon"}),
            ("/api/projects", {"name": "X", "deadline": "2099-01-01", "status": "Done"}),
            ("/api/projects/accept", {"candidate_id": "u1"}),
            ("/api/projects/accept", {"project_id": "abc", "candidate_id": "u1"}),
            ("/api/progress/update", {"project_id": 1, "candidate_id": "u1", "score": 1}),
            ("/api/progress/update", {"project_id": 1, "candidate_id": "u1", "progress": "50", "score": 1}),
            ("/api/users", {"email": "a@b.c"}),
        ]
        for path, body in cases:
            with self.subTest(path=path, body=body):
                self.assertEqual(self.client.post(path, json=body).status_code, 400)

    def test_fractional_project_id_is_rejected(self):
        project = self._create()
        for project_id in (project["id"] + 0.9, "1.9", True):
            with self.subTest(project_id=project_id):
                response = self.client.post(
                    "/api/projects/accept",
                    json={"project_id": project_id, "candidate_id": "u1"},
                )
                self.assertEqual(response.status_code, 400)
        (listed,) = self.client.get("/api/projects").json()
        self.assertEqual(listed["status"], "Pending")

    def test_numeric_string_project_id_is_accepted(self):
        project = self._create()
        response = self.client.post(
            "/api/projects/accept",
            json={"project_id": str(project["id"]), "candidate_id": "u1"},
        )
        self.assertEqual(response.status_code, 200)

    def test_progress_out_of_range(self):
        project = self._create()
        response = self.client.post(
            "/api/progress/update",
            json={"project_id": project["id"], "candidate_id": "u1", "progress": 150, "score": 1},
        )
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["detail"], "Progress must be between 0 and 100")

    def test_accepting_unknown_project_is_not_found(self):
        response = self.client.post(
            "/api/projects/accept", json={"project_id": 404, "candidate_id": "u1"}
        )
        self.assertEqual(response.status_code, 404)

    def test_accepting_completed_project_conflicts(self):
        project = self._create()
        self.client.post(
            "/api/progress/update",
            json={"project_id": project["id"], "candidate_id": "u1", "progress": 100, "score": 1},
        )
        response = self.client.post(
            "/api/projects/accept", json={"project_id": project["id"], "candidate_id": "u1"}
        )
        self.assertEqual(response.status_code, 409)


class StorageErrorTests(ApiTestCase):
    def test_detail_exposed_outside_production(self):
        project = self._create()
        with mock.patch(
            "backend.services.projects._ensure_progress_row",
            side_effect=_broken_progress_insert,
        ):
            response = self.client.post(
                "/api/projects/accept", json={"project_id": project["id"], "candidate_id": "u1"}
            )
        self.assertEqual(response.status_code, 500)
        body = response.json()
        self.assertEqual(body["detail"], "Failed to accept project")
        self.assertIn("connection lost", body["error"])

        (listed,) = self.client.get("/api/projects", params={"userId": "u1"}).json()
        self.assertEqual(listed["status"], "Pending")
        self.assertIsNone(listed["accepted_by"])


class ProductionModeTests(ApiTestCase):
    production = True

    def test_storage_error_detail_hidden(self):
        project = self._create()
        with mock.patch(
            "backend.services.projects._ensure_progress_row",
            side_effect=_broken_progress_insert,
        ):
            response = self.client.post(
                "/api/projects/accept", json={"project_id": project["id"], "candidate_id": "u1"}
            )
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json(), {"detail": "Failed to accept project"})

    def test_samples_disabled(self):
        response = self.client.post("/api/projects/samples")
        self.assertEqual(response.status_code, 403)
        self.assertEqual(self.client.get("/api/projects").json(), [])


if __name__ == "__main__":
    unittest.main()
