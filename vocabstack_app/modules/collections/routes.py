from flask import jsonify, request
from flask_login import current_user, login_required

from vocabstack_app.core.error_handlers import ValidationError
from . import collections_bp
from .services.collection_service import CollectionService


def _json_body() -> dict:
    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        raise ValidationError('Invalid JSON')
    return body


@collections_bp.route('', methods=['GET'])
@login_required
def list_collections():
    """GET /api/lists - the learner's lists with word counts."""
    return jsonify(CollectionService.list_collections(current_user.user_id))


@collections_bp.route('', methods=['POST'])
@login_required
def create_collection():
    """POST /api/lists { name, description? }"""
    body = _json_body()
    collection = CollectionService.create_collection(
        current_user.user_id, body.get('name'), body.get('description')
    )
    return jsonify(collection.to_dict()), 201


@collections_bp.route('/<int:list_id>', methods=['GET'])
@login_required
def get_collection(list_id):
    collection = CollectionService.get_collection(current_user.user_id, list_id)
    words = CollectionService.get_collection_words(current_user.user_id, list_id)
    data = collection.to_dict()
    data['words'] = [word.to_dict() for word in words]
    return jsonify(data)


@collections_bp.route('/<int:list_id>', methods=['PATCH'])
@login_required
def update_collection(list_id):
    """PATCH /api/lists/<id> { name?, description? }"""
    body = _json_body()
    collection = CollectionService.update_collection(
        current_user.user_id, list_id, name=body.get('name'), description=body.get('description')
    )
    return jsonify(collection.to_dict())


@collections_bp.route('/<int:list_id>', methods=['DELETE'])
@login_required
def delete_collection(list_id):
    CollectionService.delete_collection(current_user.user_id, list_id)
    return jsonify({'ok': True})


@collections_bp.route('/<int:list_id>/words', methods=['POST'])
@login_required
def add_word(list_id):
    """POST /api/lists/<id>/words { wordId }"""
    body = _json_body()
    added = CollectionService.add_word_to_collection(current_user.user_id, list_id, body.get('wordId'))
    return jsonify({'ok': True, 'added': added})


@collections_bp.route('/<int:list_id>/words', methods=['DELETE'])
@login_required
def remove_word(list_id):
    """DELETE /api/lists/<id>/words { wordId }"""
    body = _json_body()
    removed = CollectionService.remove_word_from_collection(current_user.user_id, list_id, body.get('wordId'))
    return jsonify({'ok': True, 'removed': removed})
