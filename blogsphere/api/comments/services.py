# blogsphere/api/comments/services.py

import logging
from typing import List, Optional

from blogsphere.core.errors import ValidationError, NotFoundError
from blogsphere.models.comment import Comment
from blogsphere.models.user import User
from blogsphere.services.data_store import DataStore
from blogsphere.services.storage_service import StorageService
from blogsphere.utils.datetime_utils import DateTimeUtils

logger = logging.getLogger(__name__)


class CommentService:
    """
    댓글 관련 비즈니스 로직을 담당하는 서비스 클래스.
    로그인한 사용자라면 누구나 어떤 게시글에든 댓글을 달 수 있습니다.
    """
    def __init__(self, store: DataStore, storage: StorageService):
        self.store = store
        self.storage = storage

    def add_comment(self, post_id: int, author: Optional[User], content: str) -> Comment:
        """새로운 댓글을 생성하고 저장합니다."""
        if author is None:
            raise ValidationError({"session": ["댓글을 작성하려면 로그인이 필요합니다."]})
        content = (content or "").strip()
        if not content:
            raise ValidationError({"content": ["댓글 내용을 입력해주세요."]})
        if self.store.find_post(post_id) is None:
            raise NotFoundError("댓글을 작성할 게시물이 존재하지 않습니다.")

        new_comment = Comment(
            id=self.store.next_id(),
            post_id=post_id,
            content=content,
            author_id=author.id,
            author_name=author.name,
            created_at=DateTimeUtils.now()
        )
        self.store.comments.append(new_comment)
        self.storage.save_collections(self.store)
        logger.info(f"댓글 생성 완료 (post_id: {post_id}, comment_id: {new_comment.id})")
        return new_comment

    def list_comments(self, post_id: int) -> List[Comment]:
        """특정 게시글의 댓글을 삽입 순서(오래된 순) 그대로 반환합니다."""
        return self.store.comments_for(post_id)

    def count_comments(self, post_id: int) -> int:
        return len(self.store.comments_for(post_id))
