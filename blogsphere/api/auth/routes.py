# blogsphere/api/auth/routes.py
import logging
from flask import Blueprint, request, jsonify, current_app
from marshmallow import ValidationError

from blogsphere.api.auth.schemas import RegisterSchema, LoginSchema, UserResponseSchema
from blogsphere.core.errors import DuplicateEmailError, InvalidCredentialsError


auth_bp = Blueprint('auth_bp', __name__)

@auth_bp.route('/register', methods=['POST'])
def register():
    """
    새 사용자를 등록합니다.
    - 등록만 하고 로그인시키지 않으므로, 클라이언트는 login 화면으로 이동합니다.
    """
    auth_service = current_app.services['auth']
    router = current_app.services['router']
    try:
        data = RegisterSchema().load(request.get_json(silent=True) or {})
        user = auth_service.register(data['name'], data['email'], data['password'])
        state = router.show_section('login')
        return jsonify({
            "user": UserResponseSchema().dump(user),
            "section": state.section.value,
            "message": "회원가입이 완료되었습니다. 로그인해주세요."
        }), 201
    except ValidationError as err:
        return jsonify({"error_code": "VALIDATION_ERROR", "details": err.messages}), 400
    except DuplicateEmailError as e:
        return jsonify({"error_code": e.error_code, "message": str(e)}), 409


@auth_bp.route('/login', methods=['POST'])
def login():
    """로그인 후 dashboard 화면으로 전환합니다."""
    auth_service = current_app.services['auth']
    router = current_app.services['router']
    try:
        data = LoginSchema().load(request.get_json(silent=True) or {})
        user = auth_service.login(data['email'], data['password'])
        state = router.show_section('dashboard')
        return jsonify({
            "user": UserResponseSchema().dump(user),
            "section": state.section.value,
            "message": f"다시 오신 것을 환영합니다, {user.name}님!"
        }), 200
    except ValidationError as err:
        return jsonify({"error_code": "VALIDATION_ERROR", "details": err.messages}), 400
    except InvalidCredentialsError as e:
        return jsonify({"error_code": e.error_code, "message": str(e)}), 401


@auth_bp.route('/logout', methods=['POST'])
def logout():
    """로그인 세션을 지우고 home 화면으로 전환합니다. 로그인 상태가 아니어도 200."""
    auth_service = current_app.services['auth']
    router = current_app.services['router']
    auth_service.logout()
    state = router.show_section('home')
    logging.info("로그아웃 요청 처리 완료")
    return jsonify({"section": state.section.value, "message": "로그아웃되었습니다."}), 200


@auth_bp.route('/session', methods=['GET'])
def get_session():
    """현재 로그인 사용자와 시작 화면을 반환합니다."""
    auth_service = current_app.services['auth']
    router = current_app.services['router']
    user = auth_service.current_user
    return jsonify({
        "user": UserResponseSchema().dump(user) if user else None,
        "section": router.initial_section().value
    }), 200
