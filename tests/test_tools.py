"""API tests for tool creation, ownership, filters and pagination."""

from app.models import User
from tests.base import API, ApiTestCase


class ToolTestCase(ApiTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.owner_id = self.make_user("ivan@admin.local", "Ivan Ivanov")
        self.other_id = self.make_user("petar@backend.local", "Petar Georgiev")
        self.owner = self.auth(self.owner_id)
        self.other = self.auth(self.other_id)
        self.ai = self.make_category("AI & Machine Learning")
        self.dev = self.make_category("Development")

    def payload(self, **overrides) -> dict:
        body = {
            "name": "ChatGPT",
            "link": "https://chat.openai.com",
            "description": "AI-powered conversational assistant",
            "category_ids": [self.ai],
        }
        body.update(overrides)
        return body


class TestCreateTool(ToolTestCase):
    def test_create_attaches_owner_categories_and_roles(self) -> None:
        backend = self.make_role("backend", "Backend Developer")
        resp = self.client.post(
            f"{API}/tools",
            json=self.payload(
                category_ids=[self.ai, self.dev],
                role_ids=[backend],
                tags=["ai", "chatbot"],
                images=["https://example.com/shot.png"],
                how_to_use="Ask questions.",
            ),
            headers=self.owner,
        )
        self.assertEqual(resp.status_code, 201)
        tool = resp.json()["tool"]
        self.assertEqual(tool["user_id"], self.owner_id)
        self.assertEqual(tool["user"]["email"], "ivan@admin.local")
        self.assertEqual(sorted(c["id"] for c in tool["categories"]), sorted([self.ai, self.dev]))
        self.assertEqual([r["id"] for r in tool["recommended_for_roles"]], [backend])
        self.assertEqual(tool["tags"], ["ai", "chatbot"])
        self.assertEqual(tool["how_to_use"], "Ask questions.")
        self.assertIsNone(tool["real_examples"])
        self.assertEqual(resp.json()["message"], "Tool created successfully")

    def test_missing_category_ids_is_422(self) -> None:
        body = self.payload()
        del body["category_ids"]
        resp = self.client.post(f"{API}/tools", json=body, headers=self.owner)
        self.assertEqual(resp.status_code, 422)
        self.assertIn("category_ids", resp.json()["errors"])

    def test_empty_category_ids_is_422(self) -> None:
        resp = self.client.post(f"{API}/tools", json=self.payload(category_ids=[]), headers=self.owner)
        self.assertEqual(resp.status_code, 422)
        self.assertIn("category_ids", resp.json()["errors"])

    def test_unknown_category_id_is_422(self) -> None:
        resp = self.client.post(
            f"{API}/tools", json=self.payload(category_ids=[self.ai, 999]), headers=self.owner
        )
        self.assertEqual(resp.status_code, 422)
        self.assertEqual(
            resp.json()["errors"], {"category_ids.1": ["The selected category_ids.1 is invalid."]}
        )

    def test_unknown_role_id_is_422(self) -> None:
        resp = self.client.post(f"{API}/tools", json=self.payload(role_ids=[5]), headers=self.owner)
        self.assertEqual(resp.status_code, 422)
        self.assertIn("role_ids.0", resp.json()["errors"])

    def test_link_must_be_url(self) -> None:
        resp = self.client.post(f"{API}/tools", json=self.payload(link="not a url"), headers=self.owner)
        self.assertEqual(resp.status_code, 422)
        self.assertIn("link", resp.json()["errors"])

    def test_description_is_required(self) -> None:
        body = self.payload()
        del body["description"]
        resp = self.client.post(f"{API}/tools", json=body, headers=self.owner)
        self.assertEqual(resp.status_code, 422)
        self.assertIn("description", resp.json()["errors"])


class TestShowTool(ToolTestCase):
    def test_unknown_tool_is_404(self) -> None:
        resp = self.client.get(f"{API}/tools/12345", headers=self.owner)
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json()["message"], "Tool not found.")

    def test_any_authenticated_user_can_read(self) -> None:
        tool_id = self.make_tool(self.owner_id, "Copilot", [self.dev])
        resp = self.client.get(f"{API}/tools/{tool_id}", headers=self.other)
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["tool"]["user"]["id"], self.owner_id)


class TestOwnership(ToolTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.tool_id = self.make_tool(self.owner_id, "Copilot", [self.dev], tags=["ai"])

    def test_other_user_cannot_update(self) -> None:
        resp = self.client.put(
            f"{API}/tools/{self.tool_id}", json={"name": "Hijacked"}, headers=self.other
        )
        self.assertEqual(resp.status_code, 403)
        self.assertEqual(resp.json()["message"], "This action is unauthorized.")
        shown = self.client.get(f"{API}/tools/{self.tool_id}", headers=self.owner)
        self.assertEqual(shown.json()["tool"]["name"], "Copilot")

    def test_other_user_cannot_delete(self) -> None:
        resp = self.client.delete(f"{API}/tools/{self.tool_id}", headers=self.other)
        self.assertEqual(resp.status_code, 403)
        self.assertEqual(
            self.client.get(f"{API}/tools/{self.tool_id}", headers=self.owner).status_code, 200
        )

    def test_owner_partial_update_keeps_omitted_fields(self) -> None:
        resp = self.client.put(
            f"{API}/tools/{self.tool_id}",
            json={"description": "Pair programmer"},
            headers=self.owner,
        )
        self.assertEqual(resp.status_code, 200)
        tool = resp.json()["tool"]
        self.assertEqual(tool["description"], "Pair programmer")
        self.assertEqual(tool["name"], "Copilot")
        self.assertEqual(tool["tags"], ["ai"])
        self.assertEqual([c["id"] for c in tool["categories"]], [self.dev])

    def test_owner_update_replaces_associations(self) -> None:
        backend = self.make_role("backend")
        designer = self.make_role("designer", "Designer")
        self.client.put(
            f"{API}/tools/{self.tool_id}", json={"role_ids": [backend]}, headers=self.owner
        )
        resp = self.client.put(
            f"{API}/tools/{self.tool_id}",
            json={"category_ids": [self.ai], "role_ids": [designer]},
            headers=self.owner,
        )
        self.assertEqual(resp.status_code, 200)
        tool = resp.json()["tool"]
        self.assertEqual([c["id"] for c in tool["categories"]], [self.ai])
        self.assertEqual([r["id"] for r in tool["recommended_for_roles"]], [designer])

    def test_update_cannot_null_required_field(self) -> None:
        resp = self.client.put(f"{API}/tools/{self.tool_id}", json={"name": None}, headers=self.owner)
        self.assertEqual(resp.status_code, 422)

    def test_update_with_unknown_category_is_422(self) -> None:
        resp = self.client.put(
            f"{API}/tools/{self.tool_id}", json={"category_ids": [404]}, headers=self.owner
        )
        self.assertEqual(resp.status_code, 422)

    def test_owner_delete_then_repeat_is_404(self) -> None:
        first = self.client.delete(f"{API}/tools/{self.tool_id}", headers=self.owner)
        self.assertEqual(first.status_code, 200)
        second = self.client.delete(f"{API}/tools/{self.tool_id}", headers=self.owner)
        self.assertEqual(second.status_code, 404)

    def test_orphaned_tool_cannot_be_mutated(self) -> None:
        orphan = self.make_tool(None, "Legacy", [self.dev])
        resp = self.client.delete(f"{API}/tools/{orphan}", headers=self.owner)
        self.assertEqual(resp.status_code, 403)


class TestListFilters(ToolTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.designer = self.make_role("designer", "Designer")
        self.chat = self.make_tool(
            self.owner_id, "ChatGPT", [self.ai], description="Conversational assistant",
            tags=["ai", "chatbot"],
        )
        self.copilot = self.make_tool(
            self.owner_id, "Copilot", [self.ai, self.dev], description="Code completion",
            tags=["ai", "coding"],
        )
        self.vim = self.make_tool(
            self.owner_id, "Vim", [self.dev], description="Editor with 100% keyboard control",
            tags=["coding"],
        )
        self.midjourney = self.make_tool(
            self.owner_id, "Midjourney", [self.ai], role_ids=[self.designer],
            description="Image generator", tags=["ai", "art"],
        )

    def ids(self, **params) -> list[int]:
        resp = self.client.get(f"{API}/tools", params=params, headers=self.owner)
        self.assertEqual(resp.status_code, 200)
        return [t["id"] for t in resp.json()["data"]]

    def test_no_filters_lists_newest_first(self) -> None:
        self.assertEqual(self.ids(), [self.midjourney, self.vim, self.copilot, self.chat])

    def test_category_filter(self) -> None:
        self.assertEqual(self.ids(category_id=self.dev), [self.vim, self.copilot])

    def test_category_and_search_must_both_hold(self) -> None:
        self.assertEqual(self.ids(category_id=self.ai, search="Code"), [self.copilot])

    def test_search_matches_name_or_description(self) -> None:
        self.assertEqual(self.ids(search="Midj"), [self.midjourney])
        self.assertEqual(self.ids(search="assistant"), [self.chat])

    def test_search_wildcards_are_literal(self) -> None:
        self.assertEqual(self.ids(search="100%"), [self.vim])
        self.assertEqual(self.ids(search="%"), [self.vim])

    def test_role_filter(self) -> None:
        self.assertEqual(self.ids(role_id=self.designer), [self.midjourney])

    def test_single_tag(self) -> None:
        self.assertEqual(self.ids(tags="coding"), [self.vim, self.copilot])

    def test_two_tags_require_both(self) -> None:
        self.assertEqual(self.ids(tags=["ai", "coding"]), [self.copilot])

    def test_bracket_tag_parameter(self) -> None:
        self.assertEqual(self.ids(**{"tags[]": ["ai", "art"]}), [self.midjourney])

    def test_no_match_returns_empty_first_page(self) -> None:
        resp = self.client.get(f"{API}/tools", params={"tags": "nothing"}, headers=self.owner)
        body = resp.json()
        self.assertEqual(body["data"], [])
        self.assertEqual(body["total"], 0)
        self.assertEqual(body["last_page"], 1)


class TestPagination(ToolTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.tool_ids = [
            self.make_tool(self.owner_id, f"Tool {i}", [self.ai]) for i in range(13)
        ]

    def test_first_page_starts_with_most_recent(self) -> None:
        body = self.client.get(f"{API}/tools", headers=self.owner).json()
        self.assertEqual(body["current_page"], 1)
        self.assertEqual(body["last_page"], 2)
        self.assertEqual(body["per_page"], 12)
        self.assertEqual(body["total"], 13)
        self.assertEqual(
            [t["id"] for t in body["data"]], list(reversed(self.tool_ids))[:12]
        )

    def test_second_page_is_the_remaining_slice(self) -> None:
        body = self.client.get(f"{API}/tools", params={"page": 2}, headers=self.owner).json()
        self.assertEqual(body["current_page"], 2)
        self.assertEqual([t["id"] for t in body["data"]], [self.tool_ids[0]])

    def test_page_zero_is_422(self) -> None:
        resp = self.client.get(f"{API}/tools", params={"page": 0}, headers=self.owner)
        self.assertEqual(resp.status_code, 422)
        self.assertIn("page", resp.json()["errors"])

    def test_page_past_the_end_is_empty(self) -> None:
        resp = self.client.get(f"{API}/tools", params={"page": 50}, headers=self.owner)
        self.assertEqual(resp.status_code, 200)
        body = resp.json()
        self.assertEqual(body["data"], [])
        self.assertEqual(body["current_page"], 50)
        self.assertEqual(body["last_page"], 2)
        self.assertEqual(body["total"], 13)

    def test_largest_page_is_empty_not_an_error(self) -> None:
        resp = self.client.get(f"{API}/tools", params={"page": 2**31 - 1}, headers=self.owner)
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["data"], [])

    def test_page_beyond_integer_range_is_422(self) -> None:
        resp = self.client.get(f"{API}/tools", params={"page": 10**18}, headers=self.owner)
        self.assertEqual(resp.status_code, 422)
        self.assertIn("page", resp.json()["errors"])


class TestOutOfRangeIds(ToolTestCase):
    def test_tool_id_beyond_integer_range_is_422(self) -> None:
        resp = self.client.get(f"{API}/tools/{10**20}", headers=self.owner)
        self.assertEqual(resp.status_code, 422)
        self.assertIn("tool_id", resp.json()["errors"])

    def test_category_filter_beyond_integer_range_is_422(self) -> None:
        resp = self.client.get(
            f"{API}/tools", params={"category_id": 10**20}, headers=self.owner
        )
        self.assertEqual(resp.status_code, 422)
        self.assertIn("category_id", resp.json()["errors"])

    def test_role_filter_beyond_integer_range_is_422(self) -> None:
        resp = self.client.get(f"{API}/tools", params={"role_id": 10**20}, headers=self.owner)
        self.assertEqual(resp.status_code, 422)
        self.assertIn("role_id", resp.json()["errors"])

    def test_category_ids_item_beyond_integer_range_is_422(self) -> None:
        resp = self.client.post(
            f"{API}/tools", json=self.payload(category_ids=[10**20]), headers=self.owner
        )
        self.assertEqual(resp.status_code, 422)
        self.assertIn("category_ids.0", resp.json()["errors"])

    def test_category_and_role_ids_beyond_integer_range_are_422(self) -> None:
        self.assertEqual(
            self.client.get(f"{API}/categories/{10**20}", headers=self.owner).status_code, 422
        )
        self.assertEqual(
            self.client.get(f"{API}/roles/{10**20}", headers=self.owner).status_code, 422
        )


class TestDeletedOwner(ToolTestCase):
    def test_tool_survives_owner_deletion_without_owner(self) -> None:
        tool_id = self.make_tool(self.owner_id, "Copilot", [self.dev])
        with self.Session() as db:
            db.delete(db.get(User, self.owner_id))
            db.commit()

        resp = self.client.get(f"{API}/tools/{tool_id}", headers=self.other)
        self.assertEqual(resp.status_code, 200)
        tool = resp.json()["tool"]
        self.assertIsNone(tool["user_id"])
        self.assertIsNone(tool["user"])
        self.assertEqual([c["id"] for c in tool["categories"]], [self.dev])
