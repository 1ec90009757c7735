# blogsphere/services/seeding.py
"""게시글이 하나도 없을 때 채워 넣는 샘플 게시글."""
import logging
from datetime import timedelta

from blogsphere.models.post import Post
from blogsphere.services.data_store import DataStore
from blogsphere.services.storage_service import StorageService
from blogsphere.utils.datetime_utils import DateTimeUtils

logger = logging.getLogger(__name__)

TEAM_AUTHOR_ID = 0
TEAM_AUTHOR_NAME = "BlogSphere Team"

SAMPLE_POSTS = [
    {
        "id": 1,
        "title": "Welcome to BlogSphere",
        "content": (
            "This is your new favorite blogging platform! Here you can share your thoughts, stories, "
            "and connect with other writers. The platform features a clean, modern design with full "
            "responsiveness across all devices."
        ),
        "category": "Announcement",
        "age": timedelta(days=1),
    },
    {
        "id": 2,
        "title": "Tips for Better Writing",
        "content": (
            "Writing is an art that improves with practice. Here are some tips: 1) Write regularly, "
            "even if it's just for 15 minutes a day. 2) Read widely to expand your vocabulary and "
            "understanding of different styles. 3) Edit ruthlessly - first drafts are meant to be "
            "improved. 4) Write about what you're passionate about."
        ),
        "category": "Writing",
        "age": timedelta(days=2),
    },
]


def seed_sample_posts(store: DataStore, storage: StorageService) -> bool:
    """posts 컬렉션이 비어 있을 때만 샘플 게시글을 추가하고 저장합니다. 추가했으면 True."""
    if store.posts:
        return False

    now = DateTimeUtils.now()
    for sample in SAMPLE_POSTS:
        created_at = now - sample["age"]
        store.posts.append(Post(
            id=sample["id"],
            title=sample["title"],
            content=sample["content"],
            category=sample["category"],
            author_id=TEAM_AUTHOR_ID,
            author_name=TEAM_AUTHOR_NAME,
            created_at=created_at,
            updated_at=created_at
        ))

    storage.save_collections(store)
    logger.info(f"샘플 게시글 {len(SAMPLE_POSTS)}개를 추가했습니다.")
    return True
