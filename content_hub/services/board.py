"""Dashboard state: ordered post list, selected post, and request epochs for stale responses."""
import itertools

from content_hub.models.schemas import BoardOut, UIPost


class RequestEpochs:
    """Monotonic token per logical action slot. Only the latest token issued for a slot is current."""

    def __init__(self):
        self._counter = itertools.count(1)
        self._latest: dict[str, int] = {}

    def issue(self, slot: str) -> int:
        token = next(self._counter)
        self._latest[slot] = token
        return token

    def is_current(self, slot: str, token: int) -> bool:
        return self._latest.get(slot) == token


class PostBoard:
    """
    Newest-first list of UIPost plus a selected pointer, for one user.
    All mutations run on the event loop, so there is no locking.
    """

    def __init__(self):
        self.posts: list[UIPost] = []
        self.selected_id: str | None = None
        self.epochs = RequestEpochs()
        # Bodies already in hand (just generated or just saved), keyed by post id
        self._content: dict[str, str] = {}

    def __len__(self) -> int:
        return len(self.posts)

    def find(self, post_id: str) -> UIPost | None:
        return next((p for p in self.posts if p.id == post_id), None)

    @property
    def selected(self) -> UIPost | None:
        return self.find(self.selected_id) if self.selected_id else None

    def upsert_front(self, post: UIPost, content: str | None = None) -> None:
        """Insert at the head, dropping any entry with the same id first."""
        self.posts = [post] + [p for p in self.posts if p.id != post.id]
        if content is not None:
            self._content[post.id] = content

    def patch(self, post_id: str, content: str | None = None, **fields) -> UIPost | None:
        """Merge fields into the entry with this id. No-op (None) when absent."""
        for i, p in enumerate(self.posts):
            if p.id == post_id:
                updated = p.model_copy(update=fields)
                self.posts[i] = updated
                if content is not None:
                    self._content[post_id] = content
                return updated
        return None

    def select(self, post_id: str) -> UIPost | None:
        """Point at the entry with this id; leaves the pointer alone when absent."""
        post = self.find(post_id)
        if post is not None:
            self.selected_id = post_id
        return post

    def cached_content(self, post_id: str) -> str | None:
        return self._content.get(post_id)

    def replace(self, posts: list[UIPost]) -> None:
        """Rebuild from a fresh listing. Keeps the selection and cached bodies of posts still listed."""
        self.posts = list(posts)
        ids = {p.id for p in self.posts}
        self._content = {k: v for k, v in self._content.items() if k in ids}
        if self.selected_id not in ids:
            self.selected_id = None

    def snapshot(self) -> BoardOut:
        return BoardOut(posts=list(self.posts), selected_id=self.selected_id)


# One board per user for the life of the process
_boards: dict[str, PostBoard] = {}


def get_board(user_id: str) -> PostBoard:
    board = _boards.get(user_id)
    if board is None:
        board = _boards[user_id] = PostBoard()
    return board


def reset_boards() -> None:
    _boards.clear()
