# blogsphere/api/views/routes.py
from flask import Blueprint, request, jsonify, current_app
from marshmallow import ValidationError

from blogsphere.api.views.schemas import ThemeSchema, ViewStateResponseSchema


views_bp = Blueprint('views_bp', __name__)

@views_bp.route('/sections/<string:name>', methods=['POST'])
def show_section(name: str):
    """섹션을 전환하고, 해당 섹션이 필요로 하는 게시글 목록을 함께 반환합니다."""
    router = current_app.services['router']
    post_service = current_app.services['posts']
    try:
        state = router.show_section(name)
    except ValidationError as err:
        return jsonify({"error_code": "VALIDATION_ERROR", "details": err.messages}), 400

    posts = None
    if state.posts is not None:
        posts = [post_service.summarize(p) for p in state.posts]
    return jsonify(ViewStateResponseSchema().dump({"section": state.section.value, "posts": posts})), 200


@views_bp.route('/theme', methods=['GET'])
def get_theme():
    theme_service = current_app.services['theme']
    return jsonify({"theme": theme_service.current()}), 200


@views_bp.route('/theme', methods=['POST'])
def change_theme():
    """theme 값이 있으면 그 테마로, 없으면 light/dark 를 뒤집습니다."""
    theme_service = current_app.services['theme']
    try:
        data = ThemeSchema().load(request.get_json(silent=True) or {})
        theme = theme_service.set_theme(data['theme']) if 'theme' in data else theme_service.toggle()
        return jsonify({"theme": theme}), 200
    except ValidationError as err:
        return jsonify({"error_code": "VALIDATION_ERROR", "details": err.messages}), 400
