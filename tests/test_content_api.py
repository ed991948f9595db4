"""API tests for contacts, testimonials, skills, website sections, personal info and GitHub configs."""

import unittest

from helpers import ApiTestCase
from portfolio.models import Contact, GithubConfig, PersonalInfo

CONTACT = {
    "name": "Grace",
    "email": "grace@example.com",
    "subject": "Project inquiry",
    "message": "Are you available?",
}


class TestContactsApi(ApiTestCase):
    def test_public_submit_is_unread(self) -> None:
        resp = self.client.post("/api/contact", json={**CONTACT, "isRead": True})
        self.assertEqual(resp.status_code, 201, resp.text)
        self.assertFalse(resp.json()["isRead"])
        self.assertEqual(self.db.query(Contact).count(), 1)

    def test_submit_with_bad_email_is_400(self) -> None:
        resp = self.client.post("/api/contact", json={**CONTACT, "email": "nope"})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(self.db.query(Contact).count(), 0)

    def test_inbox_requires_admin(self) -> None:
        self.assertEqual(self.client.get("/api/contacts").status_code, 401)
        self.assertEqual(
            self.client.get("/api/contacts", headers=self.user_headers()).status_code,
            403,
        )

    def test_admin_reads_marks_and_deletes(self) -> None:
        headers = self.admin_headers()
        contact_id = self.client.post("/api/contact", json=CONTACT).json()["id"]

        listing = self.client.get("/api/contacts", headers=headers)
        self.assertEqual([c["id"] for c in listing.json()], [contact_id])

        resp = self.client.put(f"/api/contacts/{contact_id}/read", headers=headers)
        self.assertEqual(resp.status_code, 200)
        self.assertTrue(self.client.get(f"/api/contacts/{contact_id}", headers=headers).json()["isRead"])

        self.assertEqual(self.client.delete(f"/api/contacts/{contact_id}", headers=headers).status_code, 200)
        self.assertEqual(self.client.delete(f"/api/contacts/{contact_id}", headers=headers).status_code, 404)

    def test_mark_missing_contact_is_404(self) -> None:
        resp = self.client.put("/api/contacts/9/read", headers=self.admin_headers())
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json(), {"message": "Contact not found"})


class TestTestimonialsApi(ApiTestCase):
    BASE = {"title": "CTO", "company": "Acme", "content": "Reliable and fast", "rating": 5}

    def test_public_list_shows_active_only(self) -> None:
        headers = self.admin_headers()
        self.client.post("/api/testimonials", json={**self.BASE, "name": "Visible"}, headers=headers)
        self.client.post(
            "/api/testimonials",
            json={**self.BASE, "name": "Hidden", "isActive": False},
            headers=headers,
        )
        public = self.client.get("/api/testimonials").json()
        self.assertEqual([t["name"] for t in public], ["Visible"])
        everything = self.client.get("/api/testimonials/all", headers=headers).json()
        self.assertEqual(sorted(t["name"] for t in everything), ["Hidden", "Visible"])

    def test_all_requires_admin(self) -> None:
        self.assertEqual(self.client.get("/api/testimonials/all").status_code, 401)

    def test_rating_out_of_range_is_400(self) -> None:
        resp = self.client.post(
            "/api/testimonials",
            json={**self.BASE, "name": "N", "rating": 0},
            headers=self.admin_headers(),
        )
        self.assertEqual(resp.status_code, 400)

    def test_deactivate_hides_from_public(self) -> None:
        headers = self.admin_headers()
        created = self.client.post("/api/testimonials", json={**self.BASE, "name": "Once"}, headers=headers).json()
        resp = self.client.put(f"/api/testimonials/{created['id']}", json={"isActive": False}, headers=headers)
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(self.client.get("/api/testimonials").json(), [])


class TestSkillsApi(ApiTestCase):
    def test_active_skills_in_order(self) -> None:
        headers = self.admin_headers()
        for name, order, active in (("SQL", 2, True), ("Python", 1, True), ("COBOL", 0, False)):
            resp = self.client.post(
                "/api/skills",
                json={
                    "name": name,
                    "icon": "Code",
                    "color": "text-blue-500",
                    "category": "data",
                    "order": order,
                    "isActive": active,
                },
                headers=headers,
            )
            self.assertEqual(resp.status_code, 201, resp.text)
        self.assertEqual([s["name"] for s in self.client.get("/api/skills").json()], ["Python", "SQL"])
        all_names = [s["name"] for s in self.client.get("/api/skills/all", headers=headers).json()]
        self.assertEqual(all_names, ["COBOL", "Python", "SQL"])

    def test_delete_missing_skill_is_404(self) -> None:
        resp = self.client.delete("/api/skills/3", headers=self.admin_headers())
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json(), {"message": "Skill not found"})


class TestWebsiteSectionsApi(ApiTestCase):
    def test_create_and_read_by_key(self) -> None:
        headers = self.admin_headers()
        resp = self.client.post(
            "/api/website-sections",
            json={"sectionKey": "hero", "title": "Hello", "sectionType": "hero", "columns": 3},
            headers=headers,
        )
        self.assertEqual(resp.status_code, 201, resp.text)
        section_id = resp.json()["id"]

        body = self.client.get("/api/website-sections/hero").json()
        self.assertEqual(body["id"], section_id)
        self.assertEqual(body["columns"], 3)
        self.assertEqual(body["layout"], "vertical")

        resp = self.client.put(
            f"/api/website-sections/{section_id}",
            json={"title": "Welcome"},
            headers=headers,
        )
        self.assertEqual(resp.json()["title"], "Welcome")
        self.assertEqual(resp.json()["sectionKey"], "hero")

    def test_unknown_key_is_404(self) -> None:
        resp = self.client.get("/api/website-sections/none")
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json(), {"message": "Website section not found"})

    def test_duplicate_key_is_400(self) -> None:
        headers = self.admin_headers()
        payload = {"sectionKey": "about", "title": "About", "sectionType": "about"}
        self.assertEqual(self.client.post("/api/website-sections", json=payload, headers=headers).status_code, 201)
        self.assertEqual(self.client.post("/api/website-sections", json=payload, headers=headers).status_code, 400)

    def test_columns_out_of_range_is_400(self) -> None:
        resp = self.client.post(
            "/api/website-sections",
            json={"sectionKey": "grid", "title": "Grid", "sectionType": "grid", "columns": 13},
            headers=self.admin_headers(),
        )
        self.assertEqual(resp.status_code, 400)


class TestPersonalInfoApi(ApiTestCase):
    def test_null_before_first_save(self) -> None:
        resp = self.client.get("/api/personal-info")
        self.assertEqual(resp.status_code, 200)
        self.assertIsNone(resp.json())

    def test_two_puts_leave_one_row_and_keep_omitted_fields(self) -> None:
        headers = self.admin_headers()
        first = self.client.put(
            "/api/personal-info",
            json={
                "fullName": "Jane Doe",
                "title": "Data Engineer",
                "bio": "Builds pipelines",
                "yearsOfExperience": 7,
            },
            headers=headers,
        )
        self.assertEqual(first.status_code, 200, first.text)
        second = self.client.put(
            "/api/personal-info",
            json={"fullName": "Jane Doe", "title": "Principal Engineer"},
            headers=headers,
        )
        self.assertEqual(second.json()["id"], first.json()["id"])
        self.assertEqual(self.db.query(PersonalInfo).count(), 1)
        body = self.client.get("/api/personal-info").json()
        self.assertEqual(body["title"], "Principal Engineer")
        self.assertEqual(body["bio"], "Builds pipelines")
        self.assertEqual(body["yearsOfExperience"], 7)

    def test_put_requires_admin(self) -> None:
        resp = self.client.put("/api/personal-info", json={"fullName": "X", "title": "Y"})
        self.assertEqual(resp.status_code, 401)
        self.assertEqual(self.db.query(PersonalInfo).count(), 0)


class TestGithubConfigsApi(ApiTestCase):
    def test_read_requires_authentication(self) -> None:
        self.assertEqual(self.client.get("/api/github-configs").status_code, 401)
        resp = self.client.get("/api/github-configs", headers=self.user_headers())
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), [])

    def test_write_requires_admin(self) -> None:
        resp = self.client.post(
            "/api/github-configs",
            json={"type": "user", "value": "octocat"},
            headers=self.user_headers(),
        )
        self.assertEqual(resp.status_code, 403)
        self.assertEqual(self.db.query(GithubConfig).count(), 0)

    def test_repository_value_validated(self) -> None:
        headers = self.admin_headers()
        bad = self.client.post(
            "/api/github-configs",
            json={"type": "repository", "value": "octocat"},
            headers=headers,
        )
        self.assertEqual(bad.status_code, 400)
        good = self.client.post(
            "/api/github-configs",
            json={"type": "repository", "value": "octocat/Hello-World", "displayName": "Hello"},
            headers=headers,
        )
        self.assertEqual(good.status_code, 201, good.text)
        self.assertEqual(good.json()["displayName"], "Hello")
        self.assertTrue(good.json()["isEnabled"])

    def test_update_and_delete(self) -> None:
        headers = self.admin_headers()
        created = self.client.post(
            "/api/github-configs",
            json={"type": "user", "value": "octocat"},
            headers=headers,
        ).json()
        resp = self.client.put(
            f"/api/github-configs/{created['id']}",
            json={"isEnabled": False, "order": 4},
            headers=headers,
        )
        self.assertEqual(resp.status_code, 200)
        self.assertFalse(resp.json()["isEnabled"])
        self.assertEqual(resp.json()["order"], 4)
        self.assertEqual(self.client.delete(f"/api/github-configs/{created['id']}", headers=headers).status_code, 200)
        self.assertEqual(self.client.delete(f"/api/github-configs/{created['id']}", headers=headers).status_code, 404)


class TestHealthApi(ApiTestCase):
    def test_health_reports_database(self) -> None:
        resp = self.client.get("/api/health")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["status"], "ok")
        self.assertEqual(resp.json()["database"], "connected")


if __name__ == "__main__":
    unittest.main()
