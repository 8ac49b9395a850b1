from flask import jsonify, request
from flask_login import current_user, login_required

from vocabstack_app.core.error_handlers import ValidationError
from vocabstack_app.utils.time_utils import local_today
from . import review_queue_bp
from .interface import ReviewQueueInterface


@review_queue_bp.route('/queue', methods=['POST'])
@login_required
def enqueue_words():
    """
    POST /api/queue
    { wordId: int }                  -> add a single word
    { count: int }                   -> add N unlearned words (any level)
    { count: int, level: str }       -> add N unlearned words from a level
    { listId: int }                  -> add every unlearned word of a list
    """
    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        raise ValidationError('Invalid JSON')

    user_id = current_user.user_id
    today = local_today()

    if 'wordId' in body:
        result = ReviewQueueInterface.enqueue_item(user_id, body['wordId'], today)
    elif 'listId' in body:
        result = ReviewQueueInterface.enqueue_collection(user_id, body['listId'], today)
    elif 'count' in body:
        result = ReviewQueueInterface.enqueue_new(user_id, body['count'], today, level=body.get('level'))
    else:
        raise ValidationError('Provide wordId, listId or count')

    return jsonify(result.to_dict())


def _int_arg(name, default=None):
    """Integer query argument; anything else present is a ``ValidationError``."""
    raw = request.args.get(name)
    if raw is None or raw == '':
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValidationError(f'{name} must be an integer', errors={name: raw})


@review_queue_bp.route('/due', methods=['GET'])
@login_required
def list_due():
    """GET /api/due[?listId=N&limit=N] - the learner's current due set."""
    collection_id = _int_arg('listId')
    limit = _int_arg('limit', 20)
    cards = ReviewQueueInterface.select_due(
        current_user.user_id, local_today(), collection_id=collection_id, limit=limit
    )
    return jsonify({'success': True, 'cards': [card.to_dict() for card in cards], 'total': len(cards)})
