# blogsphere/api/posts/services.py
import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from blogsphere.core.errors import ValidationError, NotFoundError, OwnershipError
from blogsphere.models.post import Post
from blogsphere.models.user import User
from blogsphere.services.data_store import DataStore
from blogsphere.services.storage_service import StorageService
from blogsphere.utils.datetime_utils import DateTimeUtils
from blogsphere.utils.text_utils import truncate_text

logger = logging.getLogger(__name__)


@dataclass
class PostSummary:
    """게시글 카드에 표시할 데이터: 게시글, 미리보기 본문, 댓글 수."""
    post: Post
    preview: str
    comment_count: int


class PostService:
    """
    게시글 관련 비즈니스 로직을 담당하는 서비스 클래스.
    수정/삭제는 작성자 본인만 가능하며, 모든 변경 후에는 저장소에 기록합니다.
    """
    def __init__(self, store: DataStore, storage: StorageService, preview_length: int = 150):
        self.store = store
        self.storage = storage
        self.preview_length = preview_length

    # --- 내부 검증 ---
    def _require_author(self, author: Optional[User]) -> User:
        if author is None:
            raise ValidationError({"session": ["로그인이 필요합니다."]})
        return author

    def _clean_fields(self, title: str, content: str, category: Optional[str]):
        title = (title or "").strip()
        content = (content or "").strip()
        errors: Dict[str, List[str]] = {}
        if not title:
            errors["title"] = ["제목은 필수 항목입니다."]
        if not content:
            errors["content"] = ["내용은 필수 항목입니다."]
        if errors:
            raise ValidationError(errors)
        return title, content, (category or "").strip()

    def ensure_owner(self, post: Post, author: Optional[User]) -> None:
        author = self._require_author(author)
        if author.id != post.author_id:
            logger.warning(f"권한 없는 게시글 접근 (post_id: {post.id}, user_id: {author.id})")
            raise OwnershipError("게시글을 수정하거나 삭제할 권한이 없습니다.")

    # --- 조회 ---
    def get_post(self, post_id: int) -> Post:
        post = self.store.find_post(post_id)
        if post is None:
            raise NotFoundError("게시글을 찾을 수 없습니다.")
        return post

    def view_post(self, post_id: int) -> Post:
        """게시글을 조회하고 현재 보고 있는 게시글(focused_post_id)로 지정합니다."""
        post = self.get_post(post_id)
        self.store.focused_post_id = post.id
        return post

    def list_public_posts(self) -> List[Post]:
        """모든 게시글을 최신순으로 반환합니다. 작성 시각이 같으면 삽입 순서를 유지합니다."""
        return sorted(self.store.posts, key=lambda p: p.created_at, reverse=True)

    def list_user_posts(self, user_id: int) -> List[Post]:
        return [p for p in self.list_public_posts() if p.author_id == user_id]

    def summarize(self, post: Post) -> PostSummary:
        return PostSummary(
            post=post,
            preview=truncate_text(post.content, self.preview_length),
            comment_count=len(self.store.comments_for(post.id))
        )

    # --- 변경 ---
    def create_post(self, author: Optional[User], title: str, content: str, category: Optional[str] = None) -> Post:
        """새 게시글을 생성합니다. 작성자 이름은 이 시점의 값으로 복사해 둡니다."""
        author = self._require_author(author)
        title, content, category = self._clean_fields(title, content, category)

        now = DateTimeUtils.now()
        new_post = Post(
            id=self.store.next_id(),
            title=title,
            content=content,
            category=category,
            author_id=author.id,
            author_name=author.name,
            created_at=now,
            updated_at=now
        )
        self.store.posts.append(new_post)
        self.storage.save_collections(self.store)
        logger.info(f"게시글 생성 완료 (post_id: {new_post.id}, user_id: {author.id})")
        return new_post

    def update_post(self, post_id: int, author: Optional[User], title: str, content: str,
                    category: Optional[str] = None) -> Post:
        """제목/내용/카테고리를 교체하고 updated_at 을 갱신합니다. 작성자 정보와 created_at 은 그대로입니다."""
        author = self._require_author(author)
        post = self.get_post(post_id)
        self.ensure_owner(post, author)
        title, content, category = self._clean_fields(title, content, category)

        post.title = title
        post.content = content
        post.category = category
        post.updated_at = DateTimeUtils.now()
        self.storage.save_collections(self.store)
        logger.info(f"게시글 수정 완료 (post_id: {post.id})")
        return post

    def delete_post(self, post_id: int, author: Optional[User]) -> None:
        """게시글과 해당 게시글의 모든 댓글을 삭제합니다."""
        author = self._require_author(author)
        post = self.get_post(post_id)
        self.ensure_owner(post, author)

        self.store.posts = [p for p in self.store.posts if p.id != post.id]
        remaining = [c for c in self.store.comments if c.post_id != post.id]
        removed_count = len(self.store.comments) - len(remaining)
        self.store.comments = remaining
        if self.store.focused_post_id == post.id:
            self.store.focused_post_id = None

        self.storage.save_collections(self.store)
        logger.info(f"게시글 삭제 완료 (post_id: {post.id}, 삭제된 댓글: {removed_count})")
