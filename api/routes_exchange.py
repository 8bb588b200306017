"""
api.routes_exchange - bulk download / upload / import endpoints.

  GET  /api/media/download   export (CSV, or JSON with ?format=json)
  POST /api/media/upload     raw body, REPLACE policy
  POST /api/media/import     {"path": ...}, MERGE policy from the resource dir
"""

import logging

from flask import request, jsonify, Response

from api import api_bp
from db import get_session
from exchange import DataFormat, ImportCoordinator, export_csv, export_json
from exchange.errors import ExchangeError, SourceNotFoundError
from exchange.exporter import export_filename
from services.media_store import MediaStore

logger = logging.getLogger(__name__)


@api_bp.route("/download")
def download():
    """GET /api/media/download?format=csv|json"""
    try:
        fmt = DataFormat.from_value(request.args.get("format", "csv"))
    except ExchangeError as exc:
        return jsonify({"error": str(exc)}), 400

    session = get_session()
    try:
        store = MediaStore(session)
        body = export_csv(store) if fmt is DataFormat.CSV else export_json(store)
    finally:
        session.close()

    return Response(
        body,
        mimetype=fmt.mimetype,
        headers={
            "Content-Disposition": f"attachment; filename={export_filename(fmt)}",
        },
    )


@api_bp.route("/upload", methods=["POST"])
def upload():
    """
    POST /api/media/upload?format=csv|json

    Raw payload as request body.  REPLACES the whole catalog.
    Responds with a plain-text message.
    """
    try:
        fmt = _upload_format()
    except ExchangeError as exc:
        return _text(f"Import failed: {exc}", 400)

    content = request.get_data()
    session = get_session()
    try:
        report = ImportCoordinator(MediaStore(session)).replace(content, fmt)
    except ExchangeError as exc:
        # ReplaceInconsistency text tells the caller the catalog is now empty
        return _text(f"Import failed: {exc}", 400)
    finally:
        session.close()

    for diag in report.diagnostics:
        logger.warning("Upload line %s: %s", diag.line, diag.reason)
    return _text(f"Import successful: {report.persisted} items imported", 200)


@api_bp.route("/import", methods=["POST"])
def import_file():
    """
    POST /api/media/import

    JSON body: {"path": "relative/to/resources.csv", "format": "csv"?}
    MERGES into the catalog; returns the import report.
    """
    data = request.get_json(force=True, silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "path is required"}), 400
    path = str(data.get("path", "")).strip()
    if not path:
        return jsonify({"error": "path is required"}), 400

    session = get_session()
    try:
        fmt = DataFormat.from_value(str(data["format"])) if data.get("format") else None
        report = ImportCoordinator(MediaStore(session)).import_path(path, fmt)
    except SourceNotFoundError as exc:
        return jsonify({"error": str(exc)}), 404
    except ExchangeError as exc:
        return jsonify({"error": str(exc)}), 400
    finally:
        session.close()

    return jsonify({"imported": report.persisted, **report.to_dict()})


def _upload_format() -> DataFormat:
    if request.args.get("format"):
        return DataFormat.from_value(request.args["format"])
    if request.mimetype == "application/json":
        return DataFormat.JSON
    return DataFormat.CSV


def _text(message: str, status: int) -> Response:
    return Response(message, status=status, mimetype="text/plain")
