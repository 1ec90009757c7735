# blogsphere/test_app.py
"""Flask 테스트 클라이언트로 API 흐름을 검증합니다."""

from blogsphere import create_app, create_services


def _register_and_login(client, name="Alice", email="a@x.com", password="secret1"):
    client.post('/api/auth/register', json={"name": name, "email": email, "password": password})
    return client.post('/api/auth/login', json={"email": email, "password": password})


def test_register_login_logout_flow(client):
    res = client.post('/api/auth/register', json={"name": "Alice", "email": "a@x.com", "password": "secret1"})
    assert res.status_code == 201
    body = res.get_json()
    assert body["section"] == "login"
    assert body["user"]["name"] == "Alice"
    assert "password" not in body["user"]

    res = client.post('/api/auth/login', json={"email": "a@x.com", "password": "secret1"})
    assert res.status_code == 200
    assert res.get_json()["section"] == "dashboard"
    assert client.get('/api/auth/session').get_json()["user"]["email"] == "a@x.com"

    res = client.post('/api/auth/logout')
    assert res.get_json()["section"] == "home"
    session = client.get('/api/auth/session').get_json()
    assert session["user"] is None
    assert session["section"] == "home"

def test_register_errors(client):
    res = client.post('/api/auth/register', json={"name": "", "email": "", "password": "123"})
    assert res.status_code == 400
    assert set(res.get_json()["details"]) == {"name", "email", "password"}

    client.post('/api/auth/register', json={"name": "Alice", "email": "a@x.com", "password": "secret1"})
    res = client.post('/api/auth/register', json={"name": "Other", "email": "a@x.com", "password": "secret1"})
    assert res.status_code == 409
    assert res.get_json()["error_code"] == "EMAIL_ALREADY_REGISTERED"

def test_login_failure_is_401(client):
    client.post('/api/auth/register', json={"name": "Alice", "email": "a@x.com", "password": "secret1"})
    wrong = client.post('/api/auth/login', json={"email": "a@x.com", "password": "nope123"})
    unknown = client.post('/api/auth/login', json={"email": "x@x.com", "password": "secret1"})
    assert wrong.status_code == unknown.status_code == 401
    assert wrong.get_json() == unknown.get_json()

def test_create_and_view_post_with_comments(client):
    _register_and_login(client)

    res = client.post('/api/posts/', json={"title": "Hi", "content": "Body"})
    assert res.status_code == 201
    post = res.get_json()
    assert post["author_name"] == "Alice"
    assert post["category"] == ""

    res = client.post(f'/api/posts/{post["id"]}/comments', json={"content": "Nice"})
    assert res.status_code == 201

    res = client.get(f'/api/posts/{post["id"]}')
    assert res.status_code == 200
    body = res.get_json()
    assert body["post"]["title"] == "Hi"
    assert [c["content"] for c in body["comments"]] == ["Nice"]

    feed = client.get('/api/posts/').get_json()["posts"]
    assert feed[0]["post"]["id"] == post["id"]
    assert feed[0]["comment_count"] == 1
    assert feed[0]["preview"] == "Body"

def test_view_post_includes_count_and_display_date(client, app):
    _register_and_login(client)
    post = client.post('/api/posts/', json={"title": "Hi", "content": "Body"}).get_json()
    client.post(f'/api/posts/{post["id"]}/comments', json={"content": "Nice"})
    client.post(f'/api/posts/{post["id"]}/comments', json={"content": "Again"})

    body = client.get(f'/api/posts/{post["id"]}').get_json()
    assert body["comment_count"] == 2
    created_at = app.services['store'].find_post(post["id"]).created_at
    assert body["post"]["display_date"] == created_at.strftime('%Y-%m-%d %H:%M')

def test_long_post_and_comment_are_accepted(client):
    """비어 있지 않으면 길이와 관계없이 작성 가능"""
    _register_and_login(client)
    res = client.post('/api/posts/', json={"title": "T" * 500, "content": "C" * 30000, "category": "K" * 80})
    assert res.status_code == 201
    post_id = res.get_json()["id"]

    res = client.post(f'/api/posts/{post_id}/comments', json={"content": "x" * 5000})
    assert res.status_code == 201

def test_create_section_then_submit(client, app):
    _register_and_login(client)
    assert client.post('/api/views/sections/create').get_json()["section"] == "create"
    assert app.services['post_form'].state.value == "CREATING"

    res = client.post('/api/posts/form/submit', json={"title": "Hi", "content": "Body"})
    assert res.status_code == 201
    assert app.services['post_form'].state.value == "IDLE"

def test_create_post_requires_login(client):
    res = client.post('/api/posts/', json={"title": "Hi", "content": "Body"})
    assert res.status_code == 400
    assert "session" in res.get_json()["details"]

def test_missing_post_is_404(client):
    _register_and_login(client)
    assert client.get('/api/posts/999').status_code == 404
    assert client.delete('/api/posts/999').status_code == 404
    assert client.post('/api/posts/999/comments', json={"content": "x"}).status_code == 404

def test_non_owner_gets_403(client):
    _register_and_login(client)
    post_id = client.post('/api/posts/', json={"title": "Hi", "content": "Body"}).get_json()["id"]
    client.post('/api/auth/logout')
    _register_and_login(client, name="Bob", email="b@x.com", password="secret2")

    res = client.patch(f'/api/posts/{post_id}', json={"title": "Hacked", "content": "Hacked"})
    assert res.status_code == 403
    assert client.delete(f'/api/posts/{post_id}').status_code == 403
    assert client.post(f'/api/posts/{post_id}/edit').status_code == 403
    assert client.get(f'/api/posts/{post_id}').get_json()["post"]["title"] == "Hi"

def test_edit_through_form(client):
    _register_and_login(client)
    post_id = client.post('/api/posts/', json={"title": "Hi", "content": "Body"}).get_json()["id"]

    res = client.post(f'/api/posts/{post_id}/edit')
    assert res.status_code == 200
    assert res.get_json()["section"] == "create"

    res = client.post('/api/posts/form/submit', json={"title": "Hello", "content": "Edited"})
    assert res.status_code == 200
    assert res.get_json()["section"] == "dashboard"
    assert res.get_json()["post"]["id"] == post_id

    # 수정 상태가 끝났으므로 다음 제출은 새 게시글
    res = client.post('/api/posts/form/submit', json={"title": "New", "content": "Body"})
    assert res.status_code == 201
    assert len(client.get('/api/posts/').get_json()["posts"]) == 2

def test_delete_post(client):
    _register_and_login(client)
    post_id = client.post('/api/posts/', json={"title": "Hi", "content": "Body"}).get_json()["id"]
    client.post(f'/api/posts/{post_id}/comments', json={"content": "Nice"})

    assert client.delete(f'/api/posts/{post_id}').status_code == 200
    assert client.get('/api/posts/').get_json()["posts"] == []
    assert client.get(f'/api/posts/{post_id}/comments').get_json()["comments"] == []

def test_sections(client):
    _register_and_login(client)
    client.post('/api/posts/', json={"title": "Hi", "content": "Body"})

    res = client.post('/api/views/sections/dashboard')
    assert res.status_code == 200
    assert [s["post"]["title"] for s in res.get_json()["posts"]] == ["Hi"]

    res = client.post('/api/views/sections/login')
    assert res.get_json()["posts"] is None

    assert client.post('/api/views/sections/unknown').status_code == 400

def test_theme(client):
    assert client.get('/api/views/theme').get_json()["theme"] == "light"
    assert client.post('/api/views/theme').get_json()["theme"] == "dark"
    assert client.post('/api/views/theme', json={"theme": "light"}).get_json()["theme"] == "light"
    assert client.post('/api/views/theme', json={"theme": "blue"}).status_code == 400

def test_session_restored_after_restart(kv_store):
    first = create_app('testing', kv_store=kv_store).test_client()
    _register_and_login(first)
    first.post('/api/posts/', json={"title": "Hi", "content": "Body"})

    # 같은 저장소로 앱을 다시 생성
    second = create_app('testing', kv_store=kv_store).test_client()
    session = second.get('/api/auth/session').get_json()
    assert session["user"]["name"] == "Alice"
    assert session["section"] == "dashboard"
    assert [s["post"]["title"] for s in second.get('/api/posts/').get_json()["posts"]] == ["Hi"]

def test_sample_posts_seeded_when_enabled(kv_store):
    app = create_app('testing', kv_store=kv_store)
    assert app.services['store'].posts == []

    app.config['SEED_SAMPLE_POSTS'] = True
    services = create_services(app.config, kv_store=kv_store)
    assert [p.title for p in services['posts'].list_public_posts()] == ["Welcome to BlogSphere", "Tips for Better Writing"]
