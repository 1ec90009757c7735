# blogsphere/models/post.py
from dataclasses import dataclass, field
from datetime import datetime

from blogsphere.utils.datetime_utils import DateTimeUtils

@dataclass
class Post:
    """
    저장소 'posts' 키에 보관되는 게시글 레코드.
    author_name 은 작성 시점의 이름을 복사해 둔 값이며, 이후 이름이 바뀌어도 갱신하지 않습니다.
    """
    id: int
    title: str
    content: str
    author_id: int
    author_name: str
    category: str = ""
    created_at: datetime = field(default_factory=DateTimeUtils.now)
    updated_at: datetime = field(default_factory=DateTimeUtils.now)
