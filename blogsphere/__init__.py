# blogsphere/__init__.py

# =====================================================================================
# 1. 환경 변수 로드 (가장 먼저 실행)
# =====================================================================================
from dotenv import load_dotenv
load_dotenv()

# =====================================================================================
# 2. 모듈 임포트 (Module Imports)
# =====================================================================================
import os
import logging
from typing import Any, Dict, Mapping, Optional
from flask import Flask, jsonify
from marshmallow import ValidationError
from werkzeug.exceptions import HTTPException

# - 설정 및 도메인 예외
from blogsphere.core.config import config_by_name
from blogsphere.core.errors import BlogError

# - API 블루프린트
from blogsphere.api.auth.routes import auth_bp
from blogsphere.api.posts.routes import posts_bp
from blogsphere.api.comments.routes import comments_bp
from blogsphere.api.views.routes import views_bp

# - 서비스 모듈
from blogsphere.services.storage_service import KeyValueStore, StorageService, create_key_value_store
from blogsphere.services.data_store import DataStore
from blogsphere.services.seeding import seed_sample_posts
from blogsphere.api.auth.services import AuthService
from blogsphere.api.posts.services import PostService
from blogsphere.api.posts.form import PostForm
from blogsphere.api.comments.services import CommentService
from blogsphere.api.views.services import ViewRouter, ThemeService


def create_services(settings: Mapping[str, Any], kv_store: Optional[KeyValueStore] = None) -> Dict[str, Any]:
    """
    저장소를 읽어 DataStore 를 만들고, 모든 서비스를 생성해 의존성을 주입합니다.
    Flask 없이도 호출할 수 있으며, create_app 은 이 결과를 app.services 에 보관합니다.
    """
    services: Dict[str, Any] = {}

    # 1. 영속화 계층 (다른 모든 서비스의 기반)
    storage = StorageService(kv_store or create_key_value_store(settings))
    services['storage'] = storage

    # 2. 인메모리 데이터 (프로세스 시작 시 한 번 로드)
    store = DataStore.load(storage)
    if settings.get('SEED_SAMPLE_POSTS', True):
        seed_sample_posts(store, storage)
    services['store'] = store

    # 3. 도메인 서비스
    services['auth'] = AuthService(store, storage, password_min_length=settings.get('PASSWORD_MIN_LENGTH', 6))
    services['posts'] = PostService(store, storage, preview_length=settings.get('PREVIEW_LENGTH', 150))
    services['comments'] = CommentService(store, storage)
    services['post_form'] = PostForm(services['posts'])
    services['router'] = ViewRouter(store, services['posts'], services['post_form'])
    services['theme'] = ThemeService(storage)

    # 4. 저장된 로그인 세션 복원 후 시작 화면 결정
    services['auth'].restore_session()
    services['router'].show_section(services['router'].initial_section())
    return services


def create_app(config_name: Optional[str] = None, kv_store: Optional[KeyValueStore] = None):
    """
    Flask 애플리케이션 팩토리 함수.
    """
    # =====================================================================================
    # 3. Flask 앱 생성 및 기본 설정
    # =====================================================================================
    config_name = config_name or os.getenv('FLASK_ENV', 'development')

    app = Flask(__name__)
    app.config.from_object(config_by_name[config_name])
    app.json.ensure_ascii = False

    # =====================================================================================
    # 4. 서비스 인스턴스 생성 및 'app.services'에 저장 (의존성 주입)
    # =====================================================================================
    try:
        app.services = create_services(app.config, kv_store=kv_store)
        logging.info("BlogSphere services initialized successfully")
    except Exception as e:
        logging.error(f"Failed to initialize services: {e}")
        raise

    # =====================================================================================
    # 5. 블루프린트 등록
    # =====================================================================================
    app.register_blueprint(auth_bp, url_prefix='/api/auth')
    app.register_blueprint(posts_bp, url_prefix='/api/posts')
    app.register_blueprint(comments_bp, url_prefix='/api')
    app.register_blueprint(views_bp, url_prefix='/api/views')

    # =====================================================================================
    # 6. 전역 에러 핸들러 설정
    # =====================================================================================
    @app.errorhandler(ValidationError)
    def handle_marshmallow_validation(err):
        response = {"error_code": "VALIDATION_ERROR", "details": err.messages}
        return jsonify(response), 400

    @app.errorhandler(BlogError)
    def handle_blog_error(err):
        if isinstance(err, ValidationError):
            return handle_marshmallow_validation(err)
        response = {"error_code": err.error_code, "message": str(err)}
        return jsonify(response), err.status_code

    @app.errorhandler(Exception)
    def handle_generic_exception(err):
        # 다른 핸들러에서 처리되지 않은 모든 예외를 여기서 처리 (404 같은 HTTP 예외는 그대로 반환)
        if isinstance(err, HTTPException):
            return err
        logging.error(f"An unhandled exception occurred: {err}", exc_info=True)
        response = {"error_code": "INTERNAL_SERVER_ERROR", "message": "서버 내부에서 예상치 못한 오류가 발생했습니다."}
        return jsonify(response), 500

    # =====================================================================================
    # 7. 로깅 및 앱 반환
    # =====================================================================================
    if not app.debug:
        logging.basicConfig(level=logging.INFO, format='%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]')

    logging.info(f"Flask app created for '{config_name}' environment.")

    return app
