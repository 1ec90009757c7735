# blogsphere/api/posts/form.py
"""게시글 작성 폼 상태: IDLE -> CREATING / EDITING(post_id) -> IDLE"""
import logging
from enum import Enum
from typing import Optional

from blogsphere.api.posts.services import PostService
from blogsphere.models.post import Post
from blogsphere.models.user import User

logger = logging.getLogger(__name__)


class PostFormState(Enum):
    IDLE = "IDLE"
    CREATING = "CREATING"
    EDITING = "EDITING"


class PostForm:
    """
    세션당 하나의 작성 폼. 한 번에 하나의 게시글만 수정 중일 수 있습니다.
    제출 성공 / 취소 / 다른 화면으로 이동하면 IDLE 로 돌아갑니다.
    """
    def __init__(self, post_service: PostService):
        self.post_service = post_service
        self.state = PostFormState.IDLE
        self.editing_post_id: Optional[int] = None

    @property
    def is_editing(self) -> bool:
        return self.state == PostFormState.EDITING

    def reset(self) -> None:
        self.state = PostFormState.IDLE
        self.editing_post_id = None

    def begin_create(self) -> None:
        self.state = PostFormState.CREATING
        self.editing_post_id = None

    def begin_edit(self, post_id: int, user: Optional[User]) -> Post:
        """작성자 본인의 게시글만 수정 상태로 전환하고, 폼을 채울 게시글을 반환합니다."""
        post = self.post_service.get_post(post_id)
        self.post_service.ensure_owner(post, user)
        self.state = PostFormState.EDITING
        self.editing_post_id = post.id
        return post

    def submit(self, user: Optional[User], title: str, content: str, category: Optional[str] = None) -> Post:
        """수정 중이면 해당 게시글을 수정하고, 아니면 새로 생성합니다. 실패하면 상태를 유지합니다."""
        if self.is_editing:
            post = self.post_service.update_post(self.editing_post_id, user, title, content, category)
        else:
            post = self.post_service.create_post(user, title, content, category)
        self.reset()
        return post

    def cancel(self) -> None:
        if self.is_editing:
            logger.info(f"게시글 수정 취소 (post_id: {self.editing_post_id})")
        self.reset()
