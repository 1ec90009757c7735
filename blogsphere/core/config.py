# blogsphere/core/config.py

import os # 환경 변수를 읽기 위해 사용합니다.


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    """모든 환경 설정의 기반이 되는 공통 설정 클래스입니다."""
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key')

    # 키-값 저장소 백엔드: 'file' (로컬 JSON 파일), 'memory', 'firestore'
    STORAGE_BACKEND = os.getenv('STORAGE_BACKEND', 'file')
    # 'file' 백엔드가 사용할 JSON 파일 경로. 브라우저의 localStorage 역할을 합니다.
    STORAGE_PATH = os.getenv('STORAGE_PATH', 'blogsphere_data.json')

    # 'firestore' 백엔드 설정. 키 하나가 컬렉션 안의 문서 하나에 대응합니다.
    FIRESTORE_COLLECTION = os.getenv('FIRESTORE_COLLECTION', 'blogsphere_kv')
    FIREBASE_CREDENTIALS_PATH = os.getenv('FIREBASE_CREDENTIALS_PATH')

    # 게시글 컬렉션이 비어 있을 때 샘플 게시글 2개를 채워 넣을지 여부
    SEED_SAMPLE_POSTS = _env_bool('SEED_SAMPLE_POSTS', 'true')

    PASSWORD_MIN_LENGTH = int(os.getenv('PASSWORD_MIN_LENGTH', 6))
    # 게시글 카드 미리보기 길이 (글자 수)
    PREVIEW_LENGTH = int(os.getenv('PREVIEW_LENGTH', 150))


class DevelopmentConfig(Config):
    """개발 환경을 위한 설정 클래스입니다."""
    DEBUG = True


class TestingConfig(Config):
    """테스트 환경을 위한 설정 클래스입니다."""
    TESTING = True
    DEBUG = False
    # 테스트는 디스크를 건드리지 않도록 메모리 저장소를 사용합니다.
    STORAGE_BACKEND = 'memory'
    SEED_SAMPLE_POSTS = False


# config_by_name: FLASK_ENV 값에 따라 create_app에서 설정 클래스를 선택할 때 사용합니다.
config_by_name = dict(
    development=DevelopmentConfig,
    testing=TestingConfig
)
