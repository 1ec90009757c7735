# blogsphere/api/posts/test_services.py
from datetime import datetime, timedelta, timezone

import pytest

from blogsphere.core.errors import ValidationError, NotFoundError
from blogsphere.models.comment import Comment
from blogsphere.models.post import Post
from blogsphere.services.data_store import DataStore


T1 = datetime(2024, 1, 1, tzinfo=timezone.utc)
T2 = T1 + timedelta(hours=1)
T3 = T1 + timedelta(hours=2)


def _post(post_id, created_at, author_id=1, title=None):
    return Post(id=post_id, title=title or f"post {post_id}", content="body", author_id=author_id,
                author_name="Someone", created_at=created_at, updated_at=created_at)


def test_create_post(post_service, alice, store):
    post = post_service.create_post(alice, "  Hi ", " Body ", " Life ")
    assert post.title == "Hi"
    assert post.content == "Body"
    assert post.category == "Life"
    assert post.author_id == alice.id
    assert post.author_name == "Alice"
    assert post.created_at == post.updated_at
    assert store.posts == [post]

def test_create_post_without_category(post_service, alice):
    assert post_service.create_post(alice, "Hi", "Body").category == ""

@pytest.mark.parametrize("title, content", [("", "Body"), ("Hi", "   "), ("  ", "")])
def test_create_post_requires_title_and_content(post_service, alice, store, title, content):
    with pytest.raises(ValidationError):
        post_service.create_post(alice, title, content)
    assert store.posts == []

def test_create_post_requires_author(post_service, store):
    with pytest.raises(ValidationError):
        post_service.create_post(None, "Hi", "Body")
    assert store.posts == []

def test_create_post_is_persisted(post_service, alice, storage):
    post = post_service.create_post(alice, "Hi", "Body")
    assert DataStore.load(storage).posts == [post]

def test_author_name_is_not_refreshed(post_service, alice):
    """작성자 이름은 작성 시점 값으로 고정"""
    post = post_service.create_post(alice, "Hi", "Body")
    alice.name = "Alicia"
    assert post.author_name == "Alice"

def test_update_post(post_service, alice):
    post = post_service.create_post(alice, "Hi", "Body", "A")
    original_created = post.created_at
    post.updated_at = original_created - timedelta(minutes=5)

    updated = post_service.update_post(post.id, alice, "Hello", "New body", None)
    assert updated is post
    assert (updated.title, updated.content, updated.category) == ("Hello", "New body", "")
    assert updated.created_at == original_created
    assert updated.updated_at >= original_created
    assert updated.author_id == alice.id
    assert updated.author_name == "Alice"

def test_update_missing_post(post_service, alice):
    with pytest.raises(NotFoundError):
        post_service.update_post(12345, alice, "t", "c")

def test_non_owner_cannot_update_or_delete(post_service, comment_service, alice, bob, store):
    post = post_service.create_post(alice, "Hi", "Body")
    comment = comment_service.add_comment(post.id, alice, "Nice")

    with pytest.raises(PermissionError):
        post_service.update_post(post.id, bob, "Hacked", "Hacked")
    with pytest.raises(PermissionError):
        post_service.delete_post(post.id, bob)

    assert store.posts == [post]
    assert (post.title, post.content) == ("Hi", "Body")
    assert store.comments == [comment]

def test_delete_post_cascades_only_its_comments(post_service, comment_service, alice, store):
    p1 = post_service.create_post(alice, "P1", "Body")
    p2 = post_service.create_post(alice, "P2", "Body")
    comment_service.add_comment(p1.id, alice, "C1")
    c2 = comment_service.add_comment(p2.id, alice, "C2")

    post_service.delete_post(p1.id, alice)
    assert store.posts == [p2]
    assert store.comments == [c2]

def test_delete_post_clears_focus(post_service, alice, store):
    post = post_service.create_post(alice, "Hi", "Body")
    post_service.view_post(post.id)
    assert store.focused_post_id == post.id

    post_service.delete_post(post.id, alice)
    assert store.focused_post_id is None
    with pytest.raises(NotFoundError):
        post_service.delete_post(post.id, alice)

def test_list_public_posts_newest_first(post_service, store):
    store.posts.extend([_post(1, T1), _post(2, T3), _post(3, T2)])
    assert [p.id for p in post_service.list_public_posts()] == [2, 3, 1]
    # 내부 컬렉션의 순서는 바꾸지 않음
    assert [p.id for p in store.posts] == [1, 2, 3]

def test_list_public_posts_ties_keep_insertion_order(post_service, store):
    store.posts.extend([_post(1, T1), _post(2, T2), _post(3, T2), _post(4, T2)])
    assert [p.id for p in post_service.list_public_posts()] == [2, 3, 4, 1]

def test_list_user_posts(post_service, store):
    store.posts.extend([_post(1, T1, author_id=7), _post(2, T2, author_id=8), _post(3, T3, author_id=7)])
    assert [p.id for p in post_service.list_user_posts(7)] == [3, 1]
    assert post_service.list_user_posts(99) == []

def test_view_post_sets_focus(post_service, store):
    store.posts.append(_post(1, T1))
    assert post_service.view_post(1).id == 1
    assert store.focused_post_id == 1
    with pytest.raises(NotFoundError):
        post_service.view_post(2)
    assert store.focused_post_id == 1

def test_summarize(post_service, store):
    post = _post(1, T1)
    post.content = "x" * 200
    store.posts.append(post)
    store.comments.extend([
        Comment(id=10, post_id=1, content="a", author_id=1, author_name="A", created_at=T1),
        Comment(id=11, post_id=1, content="b", author_id=1, author_name="A", created_at=T2),
        Comment(id=12, post_id=2, content="c", author_id=1, author_name="A", created_at=T2),
    ])
    summary = post_service.summarize(post)
    assert summary.post is post
    assert summary.preview == "x" * 150 + "..."
    assert summary.comment_count == 2

def test_alice_scenario(auth_service, post_service, comment_service):
    auth_service.register("Alice", "a@x.com", "secret1")
    alice = auth_service.login("a@x.com", "secret1")

    post = post_service.create_post(alice, "Hi", "Body")
    user_posts = post_service.list_user_posts(alice.id)
    assert [p.title for p in user_posts] == ["Hi"]

    comment_service.add_comment(post.id, alice, "Nice")
    comments = comment_service.list_comments(post.id)
    assert [c.content for c in comments] == ["Nice"]
