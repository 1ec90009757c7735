# blogsphere/api/auth/services.py
import logging
from typing import Dict, List, Optional

from blogsphere.core.errors import ValidationError, DuplicateEmailError, InvalidCredentialsError
from blogsphere.core.security import hash_password, verify_password, needs_rehash
from blogsphere.models.user import User
from blogsphere.services.data_store import DataStore
from blogsphere.services.storage_service import StorageService
from blogsphere.utils.datetime_utils import DateTimeUtils

logger = logging.getLogger(__name__)


def _utf16_length(text: str) -> int:
    """브라우저 클라이언트(JS String.length)와 같은 UTF-16 코드 단위 길이."""
    return len(text.encode("utf-16-le", errors="surrogatepass")) // 2


class AuthService:
    """
    회원가입 / 로그인 / 로그아웃과 로그인 세션(active_user) 관리를 담당하는 서비스.
    로그인 세션은 컬렉션과 별도로 'currentUser' 키에 저장되어 재시작 후에도 복원됩니다.
    """
    def __init__(self, store: DataStore, storage: StorageService, password_min_length: int = 6):
        self.store = store
        self.storage = storage
        self.password_min_length = password_min_length

    @property
    def current_user(self) -> Optional[User]:
        return self.store.active_user

    def require_user(self) -> User:
        """로그인한 사용자를 반환합니다. 로그인하지 않았으면 ValidationError."""
        if self.store.active_user is None:
            raise ValidationError({"session": ["로그인이 필요합니다."]})
        return self.store.active_user

    def register(self, name: str, email: str, password: str) -> User:
        """새 사용자를 등록합니다. 등록만 할 뿐 로그인시키지는 않습니다."""
        name = (name or "").strip()
        email = (email or "").strip()
        password = password or ""

        errors: Dict[str, List[str]] = {}
        if not name:
            errors["name"] = ["이름은 필수 항목입니다."]
        if not email:
            errors["email"] = ["이메일은 필수 항목입니다."]
        if _utf16_length(password) < self.password_min_length:
            errors["password"] = [f"비밀번호는 {self.password_min_length}자 이상이어야 합니다."]
        if errors:
            logger.warning(f"회원가입 입력값 오류: {sorted(errors)}")
            raise ValidationError(errors)

        # 대소문자를 구분하는 정확한 일치
        if self.store.find_user_by_email(email) is not None:
            logger.warning("이미 가입된 이메일로 회원가입 시도")
            raise DuplicateEmailError("이미 가입된 이메일입니다.")

        new_user = User(
            id=self.store.next_id(),
            name=name,
            email=email,
            password=hash_password(password),
            join_date=DateTimeUtils.now()
        )
        self.store.users.append(new_user)
        self.storage.save_collections(self.store)
        logger.info(f"회원가입 완료 (user_id: {new_user.id})")
        return new_user

    def login(self, email: str, password: str) -> User:
        email = (email or "").strip()
        password = password or ""

        errors: Dict[str, List[str]] = {}
        if not email:
            errors["email"] = ["이메일은 필수 항목입니다."]
        if not password:
            errors["password"] = ["비밀번호는 필수 항목입니다."]
        if errors:
            raise ValidationError(errors)

        user = next(
            (u for u in self.store.users if u.email == email and verify_password(password, u.password)),
            None
        )
        if user is None:
            # 이메일이 없는지 비밀번호가 틀렸는지는 알려주지 않습니다.
            logger.warning("로그인 실패")
            raise InvalidCredentialsError("이메일 또는 비밀번호가 올바르지 않습니다.")

        # 구버전 SHA-256 다이제스트는 로그인 성공 시 현재 스킴으로 다시 해시합니다.
        if needs_rehash(user.password):
            user.password = hash_password(password)
            self.storage.save_collections(self.store)
            logger.info(f"비밀번호 해시를 갱신했습니다 (user_id: {user.id})")

        self.store.active_user = user
        self.storage.save_current_user(user)
        logger.info(f"로그인 성공 (user_id: {user.id})")
        return user

    def logout(self) -> None:
        """로그인 세션을 지웁니다. 로그인 상태가 아니어도 안전하게 호출할 수 있습니다."""
        user = self.store.active_user
        self.store.active_user = None
        self.storage.clear_current_user()
        if user is not None:
            logger.info(f"로그아웃 처리 완료 (user_id: {user.id})")

    def restore_session(self) -> Optional[User]:
        """'currentUser' 에 저장된 세션이 있으면 다시 활성화합니다."""
        saved = self.storage.load_current_user()
        if saved is None:
            return None
        # 컬렉션에 같은 사용자가 있으면 그 객체를 사용해 참조를 하나로 유지합니다.
        user = self.store.find_user(saved.id) or saved
        self.store.active_user = user
        logger.info(f"저장된 로그인 세션 복원 (user_id: {user.id})")
        return user
