# blogsphere/core/security.py
"""Password hashing. 신규 해시는 salt + 반복 KDF, 기존 SHA-256 hex 다이제스트는 검증만 지원."""
import logging

from passlib.context import CryptContext

logger = logging.getLogger(__name__)

# pbkdf2_sha256 이 기본 스킴. hex_sha256 은 구버전 클라이언트가 저장한 다이제스트 검증용(deprecated).
pwd_context = CryptContext(schemes=["pbkdf2_sha256", "hex_sha256"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain: str, hashed: str) -> bool:
    if not hashed:
        return False
    try:
        return pwd_context.verify(plain, hashed)
    except ValueError:
        # 식별할 수 없는 해시 형식
        logger.warning("알 수 없는 비밀번호 해시 형식입니다.")
        return False


def needs_rehash(hashed: str) -> bool:
    """구버전 다이제스트처럼 현재 기본 스킴이 아닌 해시면 True."""
    try:
        return pwd_context.needs_update(hashed)
    except ValueError:
        return False
