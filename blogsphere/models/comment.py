# blogsphere/models/comment.py
from dataclasses import dataclass, field
from datetime import datetime

from blogsphere.utils.datetime_utils import DateTimeUtils

@dataclass
class Comment:
    """
    저장소 'comments' 키에 보관되는 댓글 레코드.
    """
    id: int
    post_id: int
    content: str
    author_id: int
    author_name: str
    created_at: datetime = field(default_factory=DateTimeUtils.now)
