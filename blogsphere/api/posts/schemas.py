# blogsphere/api/posts/schemas.py
from marshmallow import Schema, fields

from blogsphere.utils.datetime_utils import DateTimeUtils

# --- API 요청 스키마 ---

class PostWriteSchema(Schema):
    """게시글 작성/수정 요청 본문. 공백만 있는 제목/내용은 PostService 가 거부합니다."""
    title = fields.Str(required=True)
    content = fields.Str(required=True)
    category = fields.Str(load_default="", allow_none=True)

# --- API 응답 스키마 ---

class PostResponseSchema(Schema):
    """게시글 정보 응답을 위한 최종 JSON 형식을 정의합니다."""
    id = fields.Int(dump_only=True)
    title = fields.Str(required=True)
    content = fields.Str(required=True)
    category = fields.Str()
    author_id = fields.Int(required=True)
    author_name = fields.Str(required=True)
    created_at = fields.DateTime(required=True)
    updated_at = fields.DateTime(required=True)
    # 카드에 표시하는 작성일 (YYYY-MM-DD HH:MM)
    display_date = fields.Function(lambda post: DateTimeUtils.format_display(post.created_at), dump_only=True)

class PostSummaryResponseSchema(Schema):
    """게시글 카드(목록) 응답: 게시글 + 미리보기 + 댓글 수"""
    post = fields.Nested(PostResponseSchema, required=True)
    preview = fields.Str(required=True)
    comment_count = fields.Int(required=True)
