# blogsphere/api/comments/routes.py
from flask import Blueprint, request, jsonify, current_app
from marshmallow import ValidationError

from blogsphere.api.comments.schemas import CommentCreateSchema, CommentResponseSchema
from blogsphere.core.errors import NotFoundError


comments_bp = Blueprint('comments_bp', __name__)

@comments_bp.route('/posts/<int:post_id>/comments', methods=['POST'])
def create_comment(post_id: int):
    """
    특정 게시글에 새로운 댓글을 작성합니다. (로그인 필요)
    - 성공 시, 생성된 댓글 정보를 201 Created 상태 코드와 함께 반환합니다.
    """
    comment_service = current_app.services['comments']
    auth_service = current_app.services['auth']
    try:
        data = CommentCreateSchema().load(request.get_json(silent=True) or {})
        new_comment = comment_service.add_comment(post_id, auth_service.current_user, data['content'])
        return jsonify(CommentResponseSchema().dump(new_comment)), 201
    except ValidationError as err:
        return jsonify({"error_code": "VALIDATION_ERROR", "details": err.messages}), 400
    except NotFoundError as e:
        return jsonify({"error_code": "RESOURCE_NOT_FOUND", "message": str(e)}), 404


@comments_bp.route('/posts/<int:post_id>/comments', methods=['GET'])
def get_comments(post_id: int):
    """특정 게시글의 댓글 목록을 작성 순서대로 조회합니다."""
    comment_service = current_app.services['comments']
    return jsonify({
        "comments": CommentResponseSchema(many=True).dump(comment_service.list_comments(post_id))
    }), 200
