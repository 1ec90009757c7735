# blogsphere/conftest.py
"""
공용 pytest 픽스처

사용법: python -m pytest blogsphere -v
"""

import pytest

from blogsphere import create_app
from blogsphere.api.auth.services import AuthService
from blogsphere.api.comments.services import CommentService
from blogsphere.api.posts.form import PostForm
from blogsphere.api.posts.services import PostService
from blogsphere.api.views.services import ViewRouter, ThemeService
from blogsphere.services.data_store import DataStore
from blogsphere.services.storage_service import MemoryKeyValueStore, StorageService


@pytest.fixture
def kv_store():
    return MemoryKeyValueStore()

@pytest.fixture
def storage(kv_store):
    return StorageService(kv_store)

@pytest.fixture
def store():
    return DataStore()

@pytest.fixture
def auth_service(store, storage):
    return AuthService(store, storage)

@pytest.fixture
def post_service(store, storage):
    return PostService(store, storage)

@pytest.fixture
def comment_service(store, storage):
    return CommentService(store, storage)

@pytest.fixture
def post_form(post_service):
    return PostForm(post_service)

@pytest.fixture
def router(store, post_service, post_form):
    return ViewRouter(store, post_service, post_form)

@pytest.fixture
def theme_service(storage):
    return ThemeService(storage)

@pytest.fixture
def alice(auth_service):
    """가입 후 로그인까지 마친 사용자"""
    auth_service.register("Alice", "a@x.com", "secret1")
    return auth_service.login("a@x.com", "secret1")

@pytest.fixture
def bob(auth_service, store):
    """가입만 한 두 번째 사용자 (로그인 세션은 건드리지 않음)"""
    return auth_service.register("Bob", "b@x.com", "secret2")


# --- Flask 앱 ---

@pytest.fixture
def app(kv_store):
    return create_app('testing', kv_store=kv_store)

@pytest.fixture
def client(app):
    return app.test_client()
