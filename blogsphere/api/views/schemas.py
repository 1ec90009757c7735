# blogsphere/api/views/schemas.py
from marshmallow import Schema, fields, validate

from blogsphere.api.posts.schemas import PostSummaryResponseSchema

class ThemeSchema(Schema):
    """POST /api/views/theme 요청 본문. theme 를 생략하면 현재 테마를 뒤집습니다."""
    theme = fields.Str(validate=validate.OneOf(["light", "dark"]))

class ViewStateResponseSchema(Schema):
    """섹션 전환 결과. posts 는 dashboard / home 진입 시에만 채워집니다."""
    section = fields.Str(required=True)
    posts = fields.List(fields.Nested(PostSummaryResponseSchema), allow_none=True)
