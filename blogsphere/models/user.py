# blogsphere/models/user.py
from dataclasses import dataclass, field
from datetime import datetime

from blogsphere.utils.datetime_utils import DateTimeUtils

@dataclass
class User:
    """
    저장소 'users' 키에 보관되는 사용자 레코드.
    password 에는 평문이 아닌 비밀번호 해시가 들어갑니다.
    """
    id: int
    name: str
    email: str
    password: str
    join_date: datetime = field(default_factory=DateTimeUtils.now)
