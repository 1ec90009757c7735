# blogsphere/api/posts/routes.py
import logging
from flask import Blueprint, request, jsonify, current_app
from marshmallow import ValidationError

from blogsphere.api.posts.schemas import PostWriteSchema, PostResponseSchema, PostSummaryResponseSchema
from blogsphere.api.comments.schemas import CommentResponseSchema
from blogsphere.core.errors import NotFoundError


posts_bp = Blueprint('posts_bp', __name__)

def _summaries(post_service, posts):
    return PostSummaryResponseSchema(many=True).dump([post_service.summarize(p) for p in posts])


@posts_bp.route('/', methods=['GET'])
def get_posts():
    """전체 게시글 피드를 최신순으로 조회합니다. (비로그인 사용자도 가능)"""
    post_service = current_app.services['posts']
    return jsonify({"posts": _summaries(post_service, post_service.list_public_posts())}), 200


@posts_bp.route('/', methods=['POST'])
def create_post():
    """
    새로운 게시글을 생성합니다.
    - 성공 시, 생성된 게시글 정보를 201 Created 상태 코드와 함께 반환합니다.
    """
    post_service = current_app.services['posts']
    auth_service = current_app.services['auth']
    try:
        data = PostWriteSchema().load(request.get_json(silent=True) or {})
        new_post = post_service.create_post(auth_service.current_user, data['title'], data['content'], data.get('category'))
        return jsonify(PostResponseSchema().dump(new_post)), 201
    except ValidationError as err:
        return jsonify({"error_code": "VALIDATION_ERROR", "details": err.messages}), 400


@posts_bp.route('/<int:post_id>', methods=['GET'])
def view_post(post_id: int):
    """
    특정 게시글과 댓글 목록을 조회하고 viewPost 화면으로 전환합니다.
    """
    post_service = current_app.services['posts']
    comment_service = current_app.services['comments']
    router = current_app.services['router']
    try:
        post = post_service.view_post(post_id)
    except NotFoundError as e:
        return jsonify({"error_code": "POST_NOT_FOUND", "message": str(e)}), 404
    router.show_section('viewPost')
    return jsonify({
        "post": PostResponseSchema().dump(post),
        "comments": CommentResponseSchema(many=True).dump(comment_service.list_comments(post.id)),
        "comment_count": comment_service.count_comments(post.id)
    }), 200


@posts_bp.route('/<int:post_id>', methods=['PATCH'])
def update_post(post_id: int):
    """
    특정 게시글의 내용을 수정합니다. (작성자 본인만 가능)
    """
    post_service = current_app.services['posts']
    auth_service = current_app.services['auth']
    try:
        data = PostWriteSchema().load(request.get_json(silent=True) or {})
        updated_post = post_service.update_post(post_id, auth_service.current_user, data['title'], data['content'], data.get('category'))
        return jsonify(PostResponseSchema().dump(updated_post)), 200
    except ValidationError as err:
        return jsonify({"error_code": "VALIDATION_ERROR", "details": err.messages}), 400
    except PermissionError as e:
        return jsonify({"error_code": "FORBIDDEN", "message": str(e)}), 403
    except NotFoundError as e:
        return jsonify({"error_code": "POST_NOT_FOUND", "message": str(e)}), 404


@posts_bp.route('/<int:post_id>', methods=['DELETE'])
def delete_post(post_id: int):
    """
    특정 게시글을 삭제합니다. (작성자 본인만 가능, 댓글도 함께 삭제)
    """
    post_service = current_app.services['posts']
    auth_service = current_app.services['auth']
    try:
        post_service.delete_post(post_id, auth_service.current_user)
        return jsonify({"message": "게시글이 삭제되었습니다."}), 200
    except ValidationError as err:
        return jsonify({"error_code": "VALIDATION_ERROR", "details": err.messages}), 400
    except PermissionError as e:
        return jsonify({"error_code": "FORBIDDEN", "message": str(e)}), 403
    except NotFoundError as e:
        return jsonify({"error_code": "POST_NOT_FOUND", "message": str(e)}), 404


@posts_bp.route('/users/<int:author_id>/posts', methods=['GET'])
def get_user_posts(author_id: int):
    """특정 사용자가 작성한 게시물을 최신순으로 조회합니다."""
    post_service = current_app.services['posts']
    return jsonify({"posts": _summaries(post_service, post_service.list_user_posts(author_id))}), 200


# =====================================================================================
# 작성 폼 (create 화면)
# =====================================================================================

@posts_bp.route('/<int:post_id>/edit', methods=['POST'])
def begin_edit(post_id: int):
    """게시글을 수정 상태로 열고 create 화면으로 전환합니다."""
    post_form = current_app.services['post_form']
    auth_service = current_app.services['auth']
    router = current_app.services['router']
    try:
        post = post_form.begin_edit(post_id, auth_service.current_user)
    except ValidationError as err:
        return jsonify({"error_code": "VALIDATION_ERROR", "details": err.messages}), 400
    except PermissionError as e:
        return jsonify({"error_code": "FORBIDDEN", "message": str(e)}), 403
    except NotFoundError as e:
        return jsonify({"error_code": "POST_NOT_FOUND", "message": str(e)}), 404
    state = router.show_section('create', preserve_form=True)
    return jsonify({"section": state.section.value, "post": PostResponseSchema().dump(post)}), 200


@posts_bp.route('/form/submit', methods=['POST'])
def submit_form():
    """작성 폼 제출. 수정 중이면 수정, 아니면 새 게시글 생성 후 dashboard 로 전환합니다."""
    post_form = current_app.services['post_form']
    auth_service = current_app.services['auth']
    router = current_app.services['router']
    was_editing = post_form.is_editing
    try:
        data = PostWriteSchema().load(request.get_json(silent=True) or {})
        post = post_form.submit(auth_service.current_user, data['title'], data['content'], data.get('category'))
    except ValidationError as err:
        return jsonify({"error_code": "VALIDATION_ERROR", "details": err.messages}), 400
    except PermissionError as e:
        return jsonify({"error_code": "FORBIDDEN", "message": str(e)}), 403
    except NotFoundError as e:
        post_form.reset()
        return jsonify({"error_code": "POST_NOT_FOUND", "message": str(e)}), 404
    state = router.show_section('dashboard')
    logging.info(f"작성 폼 제출 완료 (post_id: {post.id}, 수정 여부: {was_editing})")
    return jsonify({"section": state.section.value, "post": PostResponseSchema().dump(post)}), 200 if was_editing else 201


@posts_bp.route('/form/cancel', methods=['POST'])
def cancel_form():
    """작성/수정을 취소하고 dashboard 로 전환합니다."""
    post_form = current_app.services['post_form']
    router = current_app.services['router']
    post_form.cancel()
    state = router.show_section('dashboard')
    return jsonify({"section": state.section.value}), 200
