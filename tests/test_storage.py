from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from pydantic import ValidationError

from pipeline import storage


def _item(**kw) -> dict:
    data = {"title": "Launch post", "content": "We shipped it.", "userId": "u1"}
    data.update(kw)
    return data


class StorageTestCase(unittest.TestCase):
    def setUp(self):
        self._tmpdir = tempfile.TemporaryDirectory()
        self._orig_db_path = storage.DB_PATH
        storage.reset_storage_connection_for_tests()
        storage.DB_PATH = Path(self._tmpdir.name) / "content.db"
        storage.init_db()

    def tearDown(self):
        storage.reset_storage_connection_for_tests()
        storage.DB_PATH = self._orig_db_path
        self._tmpdir.cleanup()


class SaveContentTests(StorageTestCase):
    def test_client_id_is_ignored(self):
        first = storage.save_content(_item(id="fixed-id"))
        second = storage.save_content(_item(id="fixed-id"))
        self.assertNotEqual(first, "fixed-id")
        self.assertNotEqual(first, second)
        self.assertIsNone(storage.get_content_by_id("fixed-id"))

    def test_defaults_and_timestamps(self):
        item = storage.get_content_by_id(storage.save_content(_item(tags=["launch"])))
        self.assertEqual(item.content_type, "general")
        self.assertEqual(item.platform, "other")
        self.assertEqual(item.status, "draft")
        self.assertEqual(item.language, "en")
        self.assertEqual(item.tags, ["launch"])
        self.assertEqual(item.created_at, item.updated_at)

    def test_missing_required_fields(self):
        with self.assertRaises(ValueError) as ctx:
            storage.save_content({"content": "Body"})
        self.assertEqual(str(ctx.exception), "Missing required content data: title, userId")

    def test_snake_case_keys_and_metadata(self):
        content_id = storage.save_content({
            "title": "T", "content": "C", "user_id": "u1",
            "content_type": "blog-post", "metadata": {"source": "cli"},
        })
        item = storage.get_content_by_id(content_id)
        self.assertEqual(item.content_type, "blog-post")
        self.assertEqual(item.metadata, {"source": "cli"})

    def test_unknown_id(self):
        self.assertIsNone(storage.get_content_by_id("nope"))


class UpdateContentTests(StorageTestCase):
    def test_update_touches_updated_at_and_keeps_identity(self):
        content_id = storage.save_content(_item())
        before = storage.get_content_by_id(content_id)
        self.assertTrue(storage.update_content(content_id, {"title": "New title", "userId": "intruder"}))
        after = storage.get_content_by_id(content_id)
        self.assertEqual(after.title, "New title")
        self.assertEqual(after.user_id, "u1")
        self.assertEqual(after.created_at, before.created_at)
        self.assertGreaterEqual(after.updated_at, before.updated_at)

    def test_invalid_status_rejected(self):
        content_id = storage.save_content(_item())
        with self.assertRaises(ValidationError):
            storage.update_content(content_id, {"status": "deleted"})
        self.assertEqual(storage.get_content_by_id(content_id).status, "draft")

    def test_missing_item(self):
        self.assertFalse(storage.update_content("nope", {"title": "x"}))

    def test_archive_restore_delete(self):
        content_id = storage.save_content(_item(status="published"))
        self.assertTrue(storage.archive_content(content_id))
        self.assertEqual(storage.get_content_by_id(content_id).status, "archived")
        self.assertTrue(storage.restore_content(content_id))
        self.assertEqual(storage.get_content_by_id(content_id).status, "draft")
        self.assertTrue(storage.delete_content(content_id))
        self.assertIsNone(storage.get_content_by_id(content_id))
        self.assertFalse(storage.delete_content(content_id))


class QueryTests(StorageTestCase):
    def setUp(self):
        super().setUp()
        self.first = storage.save_content(_item(title="Spring sale", contentType="email", status="published"))
        self.second = storage.save_content(_item(title="Hiring update", content="We are growing the SALES team."))
        self.third = storage.save_content(_item(title="Roadmap", contentType="blog-post"))
        storage.save_content(_item(title="Other user", userId="u2"))

    def test_most_recently_updated_first(self):
        storage.update_content(self.first, {"content": "Edited"})
        ids = [item.id for item in storage.get_user_content("u1")]
        self.assertEqual(ids, [self.first, self.third, self.second])

    def test_filters_and_limit(self):
        self.assertEqual([i.id for i in storage.get_user_content("u1", status="published")], [self.first])
        self.assertEqual([i.id for i in storage.get_user_content("u1", content_type="blog-post")], [self.third])
        self.assertEqual(len(storage.get_user_content("u1", limit=2)), 2)

    def test_search_is_case_insensitive_over_title_and_body(self):
        found = {item.id for item in storage.search_user_content("u1", "sale")}
        self.assertEqual(found, {self.first, self.second})

    def test_stats(self):
        storage.archive_content(self.third)
        self.assertEqual(storage.get_user_content_stats("u1"), {
            "total": 3,
            "published": 1,
            "draft": 1,
            "archived": 1,
            "byType": {"email": 1, "general": 1, "blog-post": 1},
        })

    def test_camel_case_dump(self):
        data = storage.get_content_by_id(self.first).model_dump(by_alias=True, mode="json")
        self.assertEqual(data["userId"], "u1")
        self.assertEqual(data["contentType"], "email")


if __name__ == "__main__":
    unittest.main()
