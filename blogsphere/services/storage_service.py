# blogsphere/services/storage_service.py
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, TYPE_CHECKING

import firebase_admin
from firebase_admin import credentials, firestore
from marshmallow import Schema, ValidationError

from blogsphere.models.user import User
from blogsphere.schemas.records import UserRecordSchema, PostRecordSchema, CommentRecordSchema

if TYPE_CHECKING:
    from blogsphere.services.data_store import DataStore

logger = logging.getLogger(__name__)

USERS_KEY = 'users'
POSTS_KEY = 'posts'
COMMENTS_KEY = 'comments'
CURRENT_USER_KEY = 'currentUser'
THEME_KEY = 'theme'


# =====================================================================================
# 키-값 저장소 백엔드 (get / set / remove)
# =====================================================================================

class KeyValueStore:
    """문자열 키에 문자열 값을 저장하는 평면 저장소 인터페이스."""

    def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set(self, key: str, value: str) -> None:
        raise NotImplementedError

    def remove(self, key: str) -> None:
        raise NotImplementedError


class MemoryKeyValueStore(KeyValueStore):
    """프로세스 메모리에만 보관하는 저장소. 테스트 환경의 기본값입니다."""

    def __init__(self, initial: Optional[Mapping[str, str]] = None):
        self.data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value

    def remove(self, key: str) -> None:
        self.data.pop(key, None)


class JsonFileKeyValueStore(KeyValueStore):
    """
    모든 키를 하나의 JSON 파일에 보관하는 저장소 (브라우저 localStorage 대응).
    쓰기마다 임시 파일에 기록한 뒤 교체하므로 중간에 끊겨도 파일이 깨지지 않습니다.
    """

    def __init__(self, path: str):
        self.path = Path(path)
        self._cache: Dict[str, str] = self._load()

    def _load(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding='utf-8'))
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"저장소 파일을 읽을 수 없습니다 ({self.path}): {e}", exc_info=True)
            return {}
        if not isinstance(data, dict):
            logger.error(f"저장소 파일 형식이 올바르지 않습니다 ({self.path}). 빈 저장소로 시작합니다.")
            return {}
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def _flush(self) -> None:
        if self.path.parent and not self.path.parent.exists():
            self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_name(self.path.name + '.tmp')
        tmp.write_text(json.dumps(self._cache, ensure_ascii=False, indent=2), encoding='utf-8')
        tmp.replace(self.path)

    def get(self, key: str) -> Optional[str]:
        return self._cache.get(key)

    def set(self, key: str, value: str) -> None:
        self._cache[key] = value
        self._flush()

    def remove(self, key: str) -> None:
        if key in self._cache:
            del self._cache[key]
            self._flush()


class FirestoreKeyValueStore(KeyValueStore):
    """
    Firestore 컬렉션을 키-값 저장소로 사용합니다.
    키 하나가 문서 하나이며, 문서 구조는 {'value': <문자열>} 입니다.
    """

    def __init__(self, collection_name: str, client: Any = None):
        self.db = client or firestore.client()
        self.collection_ref = self.db.collection(collection_name)

    def get(self, key: str) -> Optional[str]:
        doc = self.collection_ref.document(key).get()
        if not doc.exists:
            return None
        return doc.to_dict().get('value')

    def set(self, key: str, value: str) -> None:
        self.collection_ref.document(key).set({'value': value})

    def remove(self, key: str) -> None:
        self.collection_ref.document(key).delete()


def create_key_value_store(settings: Mapping[str, Any]) -> KeyValueStore:
    """설정의 STORAGE_BACKEND 값에 맞는 저장소를 생성합니다."""
    backend = settings.get('STORAGE_BACKEND', 'file')

    if backend == 'memory':
        return MemoryKeyValueStore()

    if backend == 'file':
        return JsonFileKeyValueStore(settings.get('STORAGE_PATH', 'blogsphere_data.json'))

    if backend == 'firestore':
        if not firebase_admin._apps:
            cred_path = settings.get('FIREBASE_CREDENTIALS_PATH')
            if not cred_path or not os.path.exists(cred_path):
                raise FileNotFoundError(f"Firebase 인증 파일을 찾을 수 없습니다: {cred_path}")
            firebase_admin.initialize_app(credentials.Certificate(cred_path))
        return FirestoreKeyValueStore(settings.get('FIRESTORE_COLLECTION', 'blogsphere_kv'))

    raise ValueError(f"'{backend}'은(는) 지원하지 않는 저장소 백엔드입니다.")


# =====================================================================================
# 영속화 어댑터: 컬렉션/세션/테마를 JSON 으로 직렬화해 키-값 저장소에 기록
# =====================================================================================

class StorageService:
    """
    인메모리 컬렉션과 키-값 저장소 사이의 직렬화를 담당하는 서비스.
    저장 메서드는 성공 여부를 bool 로 반환하며, 실패하더라도 예외를 던지지 않습니다.
    (메모리 상태가 기준이고 저장은 부수 효과입니다.)
    """

    def __init__(self, kv_store: KeyValueStore):
        self.kv_store = kv_store

    # --- 컬렉션 ---
    def _load_collection(self, key: str, schema: Schema) -> List[Any]:
        """
        레코드를 하나씩 읽어 올바른 레코드만 반환합니다.
        읽지 못한 레코드(또는 키 전체)는 다음 저장 때 덮어써지지 않도록 '<key>.rejected' 에 옮겨 둡니다.
        """
        raw = self.kv_store.get(key)
        if not raw:
            return []
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.error(f"'{key}' 데이터가 JSON 형식이 아닙니다. 빈 컬렉션으로 시작합니다: {e}")
            self._preserve_rejected(key, raw)
            return []
        if not isinstance(data, list):
            logger.error(f"'{key}' 데이터가 목록이 아닙니다. 빈 컬렉션으로 시작합니다.")
            self._preserve_rejected(key, raw)
            return []

        records, rejected = [], []
        for index, item in enumerate(data):
            try:
                records.append(schema.load(item))
            except (ValidationError, TypeError) as e:
                logger.error(f"'{key}' 의 {index}번째 레코드를 건너뜁니다: {e}")
                rejected.append(item)
        if rejected:
            self._preserve_rejected(key, json.dumps(rejected, ensure_ascii=False))
        return records

    def _preserve_rejected(self, key: str, raw: str) -> None:
        try:
            self.kv_store.set(f"{key}.rejected", raw)
        except Exception as e:
            logger.error(f"'{key}' 의 읽지 못한 데이터를 보관하지 못했습니다: {e}", exc_info=True)

    def load_users(self) -> list:
        return self._load_collection(USERS_KEY, UserRecordSchema())

    def load_posts(self) -> list:
        return self._load_collection(POSTS_KEY, PostRecordSchema())

    def load_comments(self) -> list:
        return self._load_collection(COMMENTS_KEY, CommentRecordSchema())

    def save_collections(self, store: "DataStore") -> bool:
        """users / posts / comments 세 컬렉션을 모두 기록합니다."""
        try:
            self.kv_store.set(USERS_KEY, json.dumps(UserRecordSchema(many=True).dump(store.users), ensure_ascii=False))
            self.kv_store.set(POSTS_KEY, json.dumps(PostRecordSchema(many=True).dump(store.posts), ensure_ascii=False))
            self.kv_store.set(COMMENTS_KEY, json.dumps(CommentRecordSchema(many=True).dump(store.comments), ensure_ascii=False))
            return True
        except Exception as e:
            logger.error(f"컬렉션 저장 실패: {e}", exc_info=True)
            return False

    # --- 로그인 세션 ---
    def load_current_user(self) -> Optional[User]:
        raw = self.kv_store.get(CURRENT_USER_KEY)
        if not raw:
            return None
        try:
            return UserRecordSchema().load(json.loads(raw))
        except (json.JSONDecodeError, ValidationError, TypeError) as e:
            logger.warning(f"저장된 로그인 세션을 읽을 수 없습니다: {e}")
            return None

    def save_current_user(self, user: User) -> bool:
        try:
            self.kv_store.set(CURRENT_USER_KEY, json.dumps(UserRecordSchema().dump(user), ensure_ascii=False))
            return True
        except Exception as e:
            logger.error(f"로그인 세션 저장 실패 (user_id: {user.id}): {e}", exc_info=True)
            return False

    def clear_current_user(self) -> bool:
        try:
            self.kv_store.remove(CURRENT_USER_KEY)
            return True
        except Exception as e:
            logger.error(f"로그인 세션 삭제 실패: {e}", exc_info=True)
            return False

    # --- 테마 ---
    def load_theme(self) -> Optional[str]:
        return self.kv_store.get(THEME_KEY)

    def save_theme(self, theme: str) -> bool:
        try:
            self.kv_store.set(THEME_KEY, theme)
            return True
        except Exception as e:
            logger.error(f"테마 저장 실패: {e}", exc_info=True)
            return False
