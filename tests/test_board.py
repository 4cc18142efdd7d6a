"""Tests for the dashboard board (ordered posts, selection) and request epochs."""
from content_hub.models.schemas import UIPost
from content_hub.services.board import PostBoard, RequestEpochs, get_board


def _post(post_id, title="Post", status="draft"):
    return UIPost(id=post_id, title=title, status=status, views=0, date="2025-03-01")


class TestUpsertFront:
    def test_inserts_at_head(self):
        board = PostBoard()
        board.upsert_front(_post("a"))
        board.upsert_front(_post("b"))
        assert [p.id for p in board.posts] == ["b", "a"]

    def test_is_idempotent_for_same_id(self):
        """Same id twice -> exactly one entry, at the head."""
        board = PostBoard()
        board.upsert_front(_post("a"))
        board.upsert_front(_post("b"))
        board.upsert_front(_post("a", title="A v2"))
        board.upsert_front(_post("a", title="A v2"))
        assert [p.id for p in board.posts] == ["a", "b"]
        assert board.posts[0].title == "A v2"

    def test_keeps_content_in_hand(self):
        board = PostBoard()
        board.upsert_front(_post("a"), content="<p>body</p>")
        assert board.cached_content("a") == "<p>body</p>"
        assert board.cached_content("b") is None


class TestPatch:
    def test_merges_fields(self):
        board = PostBoard()
        board.upsert_front(_post("a"))
        updated = board.patch("a", status="published")
        assert updated.status == "published"
        assert board.find("a").status == "published"
        assert board.find("a").title == "Post"

    def test_absent_id_is_noop(self):
        board = PostBoard()
        board.upsert_front(_post("a"))
        before = list(board.posts)
        assert board.patch("missing", title="x") is None
        assert board.posts == before
        assert len(board) == 1

    def test_selected_follows_patch(self):
        board = PostBoard()
        board.upsert_front(_post("a"))
        board.select("a")
        board.patch("a", title="Renamed")
        assert board.selected.title == "Renamed"


class TestSelect:
    def test_select_sets_pointer(self):
        board = PostBoard()
        board.upsert_front(_post("a"))
        board.upsert_front(_post("b"))
        assert board.select("a").id == "a"
        assert board.selected_id == "a"

    def test_select_unknown_keeps_pointer(self):
        board = PostBoard()
        board.upsert_front(_post("a"))
        board.select("a")
        assert board.select("zzz") is None
        assert board.selected_id == "a"


class TestReplace:
    def test_replace_drops_stale_selection_and_cache(self):
        board = PostBoard()
        board.upsert_front(_post("a"), content="A")
        board.upsert_front(_post("b"), content="B")
        board.select("a")
        board.replace([_post("b"), _post("c")])
        assert [p.id for p in board.posts] == ["b", "c"]
        assert board.selected_id is None
        assert board.cached_content("a") is None
        assert board.cached_content("b") == "B"

    def test_snapshot(self):
        board = PostBoard()
        board.upsert_front(_post("a"))
        board.select("a")
        snap = board.snapshot()
        assert snap.selected_id == "a"
        assert [p.id for p in snap.posts] == ["a"]


class TestRequestEpochs:
    def test_latest_token_is_current(self):
        epochs = RequestEpochs()
        first = epochs.issue("blog.generate")
        second = epochs.issue("blog.generate")
        assert second > first
        assert epochs.is_current("blog.generate", second)
        assert not epochs.is_current("blog.generate", first)

    def test_slots_are_independent(self):
        epochs = RequestEpochs()
        a = epochs.issue("blog.generate")
        epochs.issue("linkedin.generate")
        assert epochs.is_current("blog.generate", a)
        assert not epochs.is_current("unknown", a)


def test_board_per_user():
    assert get_board("u1") is get_board("u1")
    assert get_board("u1") is not get_board("u2")
