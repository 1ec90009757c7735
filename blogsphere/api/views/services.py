# blogsphere/api/views/services.py
"""
화면(section) 전환과 테마 설정.
ViewRouter 는 범용 상태 머신이 아니라, 섹션 이름별 진입 동작을 담은 고정 테이블입니다.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Optional

from blogsphere.api.posts.form import PostForm
from blogsphere.api.posts.services import PostService
from blogsphere.core.errors import ValidationError
from blogsphere.models.post import Post
from blogsphere.services.data_store import DataStore
from blogsphere.services.storage_service import StorageService

logger = logging.getLogger(__name__)


class Section(Enum):
    HOME = "home"
    LOGIN = "login"
    REGISTER = "register"
    DASHBOARD = "dashboard"
    CREATE = "create"
    VIEW_POST = "viewPost"


@dataclass
class ViewState:
    """활성화된 섹션과, 진입 시 새로 읽어 온 게시글 목록(해당되는 섹션만)."""
    section: Section
    posts: Optional[List[Post]] = None


class ViewRouter:
    def __init__(self, store: DataStore, post_service: PostService, post_form: PostForm):
        self.store = store
        self.post_service = post_service
        self.post_form = post_form
        self.active_section = Section.HOME
        self._entry_actions: Dict[Section, Callable[[bool], Optional[List[Post]]]] = {
            Section.DASHBOARD: self._load_dashboard,
            Section.HOME: self._load_home,
            Section.CREATE: self._open_form,
        }

    @staticmethod
    def parse_section(name) -> Section:
        if isinstance(name, Section):
            return name
        try:
            return Section(name)
        except ValueError:
            raise ValidationError({"section": [f"'{name}'은(는) 알 수 없는 화면입니다."]})

    def show_section(self, name, preserve_form: bool = False) -> ViewState:
        """
        섹션 하나만 활성화하고 진입 동작을 실행합니다.
        - dashboard: 로그인한 사용자의 게시글
        - home: 전체 게시글 (최신순)
        - create: 새 게시글 작성 상태로 전환 (preserve_form=True 이면 방금 시작한 수정 상태 유지)
        """
        section = self.parse_section(name)
        if section != Section.CREATE:
            # 작성 폼을 벗어나면 작성/수정 상태는 버립니다.
            self.post_form.reset()
        self.active_section = section
        action = self._entry_actions.get(section)
        posts = action(preserve_form) if action else None
        return ViewState(section=section, posts=posts)

    def initial_section(self) -> Section:
        """시작 화면: 복원된 로그인 세션이 있으면 dashboard, 없으면 home."""
        return Section.DASHBOARD if self.store.active_user else Section.HOME

    # --- 진입 동작 ---
    def _load_dashboard(self, preserve_form: bool) -> List[Post]:
        user = self.store.active_user
        if user is None:
            return []
        return self.post_service.list_user_posts(user.id)

    def _load_home(self, preserve_form: bool) -> List[Post]:
        return self.post_service.list_public_posts()

    def _open_form(self, preserve_form: bool) -> None:
        if not preserve_form:
            self.post_form.begin_create()
        return None


class ThemeService:
    """'theme' 키에 'dark' / 'light' 를 저장합니다. 저장된 값이 없으면 light."""
    THEMES = ("light", "dark")

    def __init__(self, storage: StorageService):
        self.storage = storage

    def current(self) -> str:
        return "dark" if self.storage.load_theme() == "dark" else "light"

    def set_theme(self, theme: str) -> str:
        if theme not in self.THEMES:
            raise ValidationError({"theme": ["테마는 'light' 또는 'dark' 여야 합니다."]})
        self.storage.save_theme(theme)
        return theme

    def toggle(self) -> str:
        return self.set_theme("light" if self.current() == "dark" else "dark")
