# blogsphere/services/data_store.py
import logging
from typing import Iterable, List, Optional

from blogsphere.models.user import User
from blogsphere.models.post import Post
from blogsphere.models.comment import Comment
from blogsphere.services.storage_service import StorageService
from blogsphere.utils.datetime_utils import DateTimeUtils

logger = logging.getLogger(__name__)


class DataStore:
    """
    사용자/게시글/댓글 세 컬렉션(삽입 순서 유지)과 두 개의 커서를 보관하는 인메모리 저장소.
    - active_user: 로그인한 사용자 (없으면 None)
    - focused_post_id: 현재 보고 있는 게시글 (없으면 None)
    상태 변경은 AuthService / PostService / CommentService 를 통해서만 이루어집니다.
    """

    def __init__(self,
                 users: Optional[Iterable[User]] = None,
                 posts: Optional[Iterable[Post]] = None,
                 comments: Optional[Iterable[Comment]] = None):
        self.users: List[User] = list(users or [])
        self.posts: List[Post] = list(posts or [])
        self.comments: List[Comment] = list(comments or [])
        self.active_user: Optional[User] = None
        self.focused_post_id: Optional[int] = None
        self._last_id = max(
            [u.id for u in self.users] + [p.id for p in self.posts] + [c.id for c in self.comments],
            default=0
        )

    @classmethod
    def load(cls, storage: StorageService) -> "DataStore":
        """영속화 저장소에서 세 컬렉션을 읽어 새 DataStore 를 만듭니다."""
        store = cls(
            users=storage.load_users(),
            posts=storage.load_posts(),
            comments=storage.load_comments()
        )
        logger.info(f"데이터 로드 완료: users={len(store.users)}, posts={len(store.posts)}, comments={len(store.comments)}")
        return store

    def next_id(self) -> int:
        """생성 시각(밀리초) 기반 식별자. 같은 밀리초에 여러 번 호출되면 1씩 증가시킵니다."""
        candidate = DateTimeUtils.to_timestamp_ms(DateTimeUtils.now())
        if candidate <= self._last_id:
            candidate = self._last_id + 1
        self._last_id = candidate
        return candidate

    # --- 조회 ---
    def find_user(self, user_id: int) -> Optional[User]:
        return next((u for u in self.users if u.id == user_id), None)

    def find_user_by_email(self, email: str) -> Optional[User]:
        return next((u for u in self.users if u.email == email), None)

    def find_post(self, post_id: int) -> Optional[Post]:
        return next((p for p in self.posts if p.id == post_id), None)

    def comments_for(self, post_id: int) -> List[Comment]:
        return [c for c in self.comments if c.post_id == post_id]
