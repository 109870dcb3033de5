"""Tests for the like/comment mutation logic and account operations."""

from __future__ import annotations

import re
import unittest
from unittest.mock import MagicMock

from shortfeed.core.errors import Conflict, NotFound
from shortfeed.services.user_service import user_service
from shortfeed.services.video_service import utc_timestamp, video_service
from shortfeed.storage import AlreadyLiked, StaleWrite, StorageBackend

from tests.support import StoreTestCase


class VideoServiceTests(StoreTestCase):
    """Run the mutation logic against a real file-backed store."""

    def setUp(self) -> None:
        super().setUp()
        video_service.ensure_seeded(self.store)

    def test_ensure_seeded_is_idempotent(self) -> None:
        self.assertEqual(video_service.ensure_seeded(self.store), 0)
        self.assertEqual(len(video_service.list_feed(self.store)), 5)

    def test_repeat_like_returns_unchanged_count(self) -> None:
        """Count one increment no matter how many times the same user likes."""
        counts = [video_service.like_video(self.store, 1, 7) for _ in range(4)]
        self.assertEqual(counts, [1, 1, 1, 1])

    def test_like_from_second_user(self) -> None:
        video_service.like_video(self.store, 1, 7)
        self.assertEqual(video_service.like_video(self.store, 1, 8), 2)

    def test_like_unknown_video_raises_not_found(self) -> None:
        with self.assertRaises(NotFound) as ctx:
            video_service.like_video(self.store, 404, 7)
        self.assertEqual(ctx.exception.code, "not_found")

    def test_add_comment_returns_stored_comment(self) -> None:
        """Return exactly what a later read of the thread shows."""
        before = len(video_service.get_comments(self.store, 2))

        comment = video_service.add_comment(self.store, 2, "alice", "nice shot")

        self.assertEqual(comment["user"], "alice")
        self.assertEqual(comment["text"], "nice shot")
        thread = video_service.get_comments(self.store, 2)
        self.assertEqual(len(thread), before + 1)
        self.assertEqual(thread[-1], comment)
        self.assertEqual(video_service.get_video(self.store, 2)["commentCount"], len(thread))

    def test_add_comment_unknown_video(self) -> None:
        with self.assertRaises(NotFound):
            video_service.add_comment(self.store, 404, "alice", "hello")

    def test_get_comments_unknown_video(self) -> None:
        with self.assertRaises(NotFound):
            video_service.get_comments(self.store, 404)


class VideoServiceConditionTests(unittest.TestCase):
    """Exercise the rejected-conditional-update branch in isolation."""

    def test_already_liked_reads_current_count(self) -> None:
        store = MagicMock(spec=StorageBackend)
        store.like_video.side_effect = AlreadyLiked("dup")
        store.get_like_count.return_value = 12

        self.assertEqual(video_service.like_video(store, 3, 9), 12)
        store.like_video.assert_called_once_with(3, "9")
        store.get_like_count.assert_called_once_with(3)

    def test_ensure_seeded_skips_populated_collection(self) -> None:
        store = MagicMock(spec=StorageBackend)
        store.count_videos.return_value = 2

        self.assertEqual(video_service.ensure_seeded(store), 0)
        store.insert_seed_videos.assert_not_called()

    def test_utc_timestamp_format(self) -> None:
        self.assertRegex(utc_timestamp(), re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z$"))


class UserServiceTests(StoreTestCase):

    def test_create_user_hashes_password(self) -> None:
        user = user_service.create_user(self.store, "alice", "secret1")

        self.assertNotEqual(user["passwordHash"], "secret1")
        self.assertIsNotNone(user_service.authenticate_user(self.store, "alice", "secret1"))

    def test_duplicate_signup_raises_conflict(self) -> None:
        user_service.create_user(self.store, "alice", "secret1")

        with self.assertRaises(Conflict) as ctx:
            user_service.create_user(self.store, "alice", "other12")
        self.assertEqual(ctx.exception.code, "username_taken")

    def test_authenticate_rejects_bad_password_and_unknown_user(self) -> None:
        user_service.create_user(self.store, "alice", "secret1")

        self.assertIsNone(user_service.authenticate_user(self.store, "alice", "wrong"))
        self.assertIsNone(user_service.authenticate_user(self.store, "bob", "secret1"))

    def test_change_password_with_wrong_old_password_keeps_hash(self) -> None:
        """Leave the stored hash byte-for-byte unchanged on a failed check."""
        user_service.create_user(self.store, "alice", "secret1")
        before = self.store.get_user("alice")["passwordHash"]

        self.assertFalse(user_service.change_password(self.store, "alice", "wrong", "newsecret"))
        self.assertEqual(self.store.get_user("alice")["passwordHash"], before)

    def test_change_password_success(self) -> None:
        user_service.create_user(self.store, "alice", "secret1")

        self.assertTrue(user_service.change_password(self.store, "alice", "secret1", "newsecret"))
        self.assertIsNone(user_service.authenticate_user(self.store, "alice", "secret1"))
        self.assertIsNotNone(user_service.authenticate_user(self.store, "alice", "newsecret"))

    def test_change_password_unknown_user(self) -> None:
        self.assertFalse(user_service.change_password(self.store, "ghost", "secret1", "newsecret"))

    def test_change_password_lost_race_returns_false(self) -> None:
        user_service.create_user(self.store, "alice", "secret1")
        store = MagicMock(wraps=self.store)
        store.replace_password_hash.side_effect = StaleWrite("alice")

        self.assertFalse(user_service.change_password(store, "alice", "secret1", "newsecret"))

    def test_courses_roundtrip(self) -> None:
        user_service.create_user(self.store, "alice", "secret1")

        user_service.add_course(self.store, "alice", "Biology")
        user_service.add_course(self.store, "alice", "Algebra")
        self.assertEqual(user_service.remove_course(self.store, "alice", "Biology"), ["Algebra"])
        self.assertEqual(user_service.get_courses(self.store, "alice"), ["Algebra"])

    def test_courses_unknown_user(self) -> None:
        with self.assertRaises(NotFound) as ctx:
            user_service.get_courses(self.store, "ghost")
        self.assertEqual(ctx.exception.code, "user_not_found")
