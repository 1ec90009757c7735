# blogsphere/core/errors.py
"""
도메인 예외 정의.

모든 예외는 복구 가능한 오류이며, 상태를 변경하기 전에 발생합니다.
라우트 계층은 error_code / status_code 를 그대로 JSON 응답에 사용합니다.
"""
from marshmallow import ValidationError as SchemaValidationError


class BlogError(Exception):
    """BlogSphere 도메인 예외의 기반 클래스."""
    error_code = "BLOG_ERROR"
    status_code = 400


class ValidationError(BlogError, SchemaValidationError):
    """
    필수 항목 누락 또는 형식 오류.
    marshmallow.ValidationError 를 상속하므로 `messages` 에 {필드: [메시지]} 형태로 담깁니다.
    """
    error_code = "VALIDATION_ERROR"
    status_code = 400


class DuplicateEmailError(BlogError):
    """이미 가입된 이메일로 회원가입을 시도한 경우."""
    error_code = "EMAIL_ALREADY_REGISTERED"
    status_code = 409


class InvalidCredentialsError(BlogError):
    """로그인 실패. 이메일이 없는 경우와 비밀번호가 틀린 경우를 구분하지 않습니다."""
    error_code = "INVALID_CREDENTIALS"
    status_code = 401


class NotFoundError(BlogError, LookupError):
    """존재하지 않는 게시글 등을 참조한 경우."""
    error_code = "NOT_FOUND"
    status_code = 404


class OwnershipError(BlogError, PermissionError):
    """작성자 본인이 아닌 사용자가 수정/삭제를 시도한 경우."""
    error_code = "FORBIDDEN"
    status_code = 403
