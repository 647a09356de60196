# hoshizora/api/categories.py

from flask import jsonify, request

from hoshizora.decorators import api_token_required
from hoshizora.errors import CategoryValidationError
from hoshizora.messages import DESCRIPTION_INVALID
from hoshizora.services import categories as category_service

from . import bp


def _text(value):
    # Non-string values count as missing and fail validation as such
    return value.strip() if isinstance(value, str) else ''


def _payload():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}
    description = data.get('description')
    if description is not None and not isinstance(description, str):
        raise CategoryValidationError(fields={'description': DESCRIPTION_INVALID})
    return _text(data.get('name')), _text(data.get('slug')), description


@bp.route('/categories', methods=['GET'])
def list_categories():
    return jsonify([category.to_dict() for category in category_service.list_categories()])


@bp.route('/categories', methods=['POST'])
@api_token_required
def create_category():
    name, slug, description = _payload()
    category = category_service.create_category(name, slug, description)
    return jsonify(category.to_dict()), 201


@bp.route('/categories/<uuid:category_id>', methods=['GET'])
def get_category(category_id):
    return jsonify(category_service.get_category(category_id).to_dict())


@bp.route('/categories/<uuid:category_id>', methods=['PUT'])
@api_token_required
def update_category(category_id):
    category = category_service.get_category(category_id)
    name, slug, description = _payload()
    category = category_service.update_category(category, name, slug, description)
    return jsonify(category.to_dict())


@bp.route('/categories/<uuid:category_id>', methods=['DELETE'])
@api_token_required
def delete_category(category_id):
    category = category_service.get_category(category_id)
    category_service.delete_category(category)
    return jsonify({'message': 'ลบหมวดหมู่เรียบร้อยแล้ว'})
