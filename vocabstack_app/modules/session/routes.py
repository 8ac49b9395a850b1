from flask import jsonify, request, url_for
from flask_login import current_user, login_required

from vocabstack_app.core.error_handlers import ValidationError
from vocabstack_app.modules.srs.interface import quality_from_label
from vocabstack_app.utils.time_utils import local_today
from . import session_bp
from .interface import SessionInterface


def _quality_from_body(body: dict):
    quality = body.get('quality')
    if isinstance(quality, str):
        try:
            return quality_from_label(quality)
        except KeyError:
            raise ValidationError('Quality must be one of 0, 2, 3, 5', errors={'quality': quality})
    return quality


@session_bp.route('/study', methods=['GET'])
@login_required
def begin_study():
    """GET /api/study[?listId=N] - start a session on the first due card."""
    collection_id = SessionInterface.parse_cursor(request.args).collection_id
    state = SessionInterface.begin_session(current_user.user_id, local_today(), collection_id)
    return jsonify(state.to_dict())


@session_bp.route('/answer', methods=['POST'])
@login_required
def answer_card():
    """
    POST /api/answer
    { progressId, quality, card, reviewed, correct, listId?, key? }
    """
    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        raise ValidationError('Invalid JSON')

    cursor = SessionInterface.parse_cursor(body)
    quality = _quality_from_body(body)
    next_cursor = SessionInterface.answer(
        current_user.user_id, cursor, body.get('progressId'), quality, local_today()
    )
    return jsonify({
        'ok': True,
        'correct': next_cursor.correct_count > cursor.correct_count,
        'cursor': next_cursor.to_query_args(),
        'nextUrl': url_for('session.advance_session', **next_cursor.to_query_args()),
    })


@session_bp.route('/session', methods=['GET'])
@login_required
def advance_session():
    """GET /api/session?card=N&reviewed=N&correct=N[&listId=N][&key=K] - next card or end."""
    cursor = SessionInterface.parse_cursor(request.args)
    state = SessionInterface.advance(current_user.user_id, cursor, local_today())
    return jsonify(state.to_dict())
