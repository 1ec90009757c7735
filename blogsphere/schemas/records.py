# blogsphere/schemas/records.py
"""
키-값 저장소에 JSON 으로 기록되는 레코드 스키마.
키 이름은 기존 브라우저 클라이언트가 남긴 데이터와 호환되도록 camelCase 를 사용합니다.
"""
from marshmallow import Schema, fields, post_load, EXCLUDE, ValidationError

from blogsphere.models.user import User
from blogsphere.models.post import Post
from blogsphere.models.comment import Comment
from blogsphere.utils.datetime_utils import DateTimeUtils


class IsoDateTime(fields.Field):
    """'2024-01-15T10:30:00.123Z' 형식 문자열 <-> UTC datetime"""

    def _serialize(self, value, attr, obj, **kwargs):
        if value is None:
            return None
        return DateTimeUtils.to_iso_string(value)

    def _deserialize(self, value, attr, data, **kwargs):
        try:
            return DateTimeUtils.parse_iso_datetime(value)
        except ValueError as e:
            raise ValidationError(str(e)) from e


class UserRecordSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    id = fields.Int(required=True)
    name = fields.Str(required=True)
    email = fields.Str(required=True)
    password = fields.Str(required=True)
    join_date = IsoDateTime(data_key="joinDate", required=True)

    @post_load
    def make_user(self, data, **kwargs):
        return User(**data)


class PostRecordSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    id = fields.Int(required=True)
    title = fields.Str(required=True)
    content = fields.Str(required=True)
    category = fields.Str(allow_none=True, load_default="")
    author_id = fields.Int(data_key="authorId", required=True)
    author_name = fields.Str(data_key="authorName", required=True)
    created_at = IsoDateTime(data_key="createdAt", required=True)
    updated_at = IsoDateTime(data_key="updatedAt", required=True)

    @post_load
    def make_post(self, data, **kwargs):
        # 구버전 데이터에는 category 가 null 로 들어있을 수 있음
        data["category"] = data.get("category") or ""
        return Post(**data)


class CommentRecordSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    id = fields.Int(required=True)
    post_id = fields.Int(data_key="postId", required=True)
    content = fields.Str(required=True)
    author_id = fields.Int(data_key="authorId", required=True)
    author_name = fields.Str(data_key="authorName", required=True)
    created_at = IsoDateTime(data_key="createdAt", required=True)

    @post_load
    def make_comment(self, data, **kwargs):
        return Comment(**data)
