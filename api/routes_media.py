"""
api.routes_media - /api/media CRUD endpoints.
"""

from flask import request, jsonify, abort

from api import api_bp
from db import get_session
from exchange.schemas import MediaItemPayload
from services.media_store import MediaStore


@api_bp.route("")
def list_items():
    """GET /api/media"""
    session = get_session()
    try:
        return jsonify([r.to_dict() for r in MediaStore(session).get_all()])
    finally:
        session.close()


@api_bp.route("/count")
def count_items():
    """GET /api/media/count"""
    session = get_session()
    try:
        return jsonify(MediaStore(session).count())
    finally:
        session.close()


@api_bp.route("/<int:item_id>")
def get_item(item_id: int):
    """GET /api/media/{id}"""
    session = get_session()
    try:
        return jsonify(MediaStore(session).get_by_id(item_id).to_dict())
    finally:
        session.close()


@api_bp.route("", methods=["POST"])
def create_item():
    """
    POST /api/media

    JSON body with media item fields.  Any ``id`` in the body is ignored;
    the store assigns one.
    """
    record = _payload().to_record()
    record.id = None
    session = get_session()
    try:
        saved = MediaStore(session).upsert(record)
        return jsonify(saved.to_dict()), 201
    finally:
        session.close()


@api_bp.route("/<int:item_id>", methods=["PUT"])
def update_item(item_id: int):
    """PUT /api/media/{id}  (JSON body replaces all payload fields)"""
    record = _payload().to_record()
    session = get_session()
    try:
        store = MediaStore(session)
        store.get_by_id(item_id)
        record.id = item_id
        return jsonify(store.upsert(record).to_dict())
    finally:
        session.close()


@api_bp.route("/<int:item_id>", methods=["DELETE"])
def delete_item(item_id: int):
    """DELETE /api/media/{id}"""
    session = get_session()
    try:
        MediaStore(session).delete_by_id(item_id)
        return "", 204
    finally:
        session.close()


def _payload() -> MediaItemPayload:
    data = request.get_json(force=True, silent=True)
    if not isinstance(data, dict):
        abort(400)
    return MediaItemPayload.model_validate(data)
