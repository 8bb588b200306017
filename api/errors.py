"""
api.errors - JSON error handlers for the API blueprint.
"""

from flask import jsonify
from pydantic import ValidationError

from api import api_bp
from exchange.errors import NotFoundError, PersistenceError


@api_bp.errorhandler(NotFoundError)
def api_item_not_found(e):
    return jsonify({"error": str(e)}), 404


@api_bp.errorhandler(ValidationError)
def api_invalid_body(e):
    return jsonify({"error": "invalid media item", "details": e.errors(include_url=False, include_context=False)}), 400


@api_bp.errorhandler(PersistenceError)
def api_rejected(e):
    return jsonify({"error": str(e)}), 400


@api_bp.errorhandler(404)
def api_not_found(_e):
    return jsonify({"error": "not found"}), 404


@api_bp.errorhandler(400)
def api_bad_request(_e):
    return jsonify({"error": "bad request"}), 400


@api_bp.errorhandler(500)
def api_server_error(_e):
    return jsonify({"error": "internal server error"}), 500
