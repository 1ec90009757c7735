# blogsphere/api/comments/schemas.py
from marshmallow import Schema, fields

class CommentCreateSchema(Schema):
    """
    POST /api/posts/{post_id}/comments
    댓글 생성을 요청할 때의 데이터 형식을 정의합니다.
    """
    content = fields.Str(required=True)

class CommentResponseSchema(Schema):
    """
    댓글 정보 응답을 위한 최종 JSON 형식을 정의합니다.
    """
    id = fields.Int(required=True)
    post_id = fields.Int(required=True)
    content = fields.Str(required=True)
    author_id = fields.Int(required=True)
    author_name = fields.Str(required=True)
    created_at = fields.DateTime(required=True)
