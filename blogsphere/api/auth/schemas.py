# blogsphere/api/auth/schemas.py
from marshmallow import Schema, fields

class RegisterSchema(Schema):
    """POST /api/auth/register 요청 본문. 빈 값/길이 검사는 AuthService 가 필드별로 수행합니다."""
    name = fields.Str(required=True)
    email = fields.Str(required=True)
    password = fields.Str(required=True)

class LoginSchema(Schema):
    """POST /api/auth/login 요청 본문"""
    email = fields.Str(required=True)
    password = fields.Str(required=True)

class UserResponseSchema(Schema):
    """
    사용자 정보 응답 스키마.
    비밀번호 해시는 제외하고 반환합니다.
    """
    id = fields.Int(dump_only=True)
    name = fields.Str()
    email = fields.Str()
    join_date = fields.DateTime()
