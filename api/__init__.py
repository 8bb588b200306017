"""
api - REST API layer.

All route modules register on a single Flask Blueprint
with url_prefix /api/media.
"""

from flask import Blueprint

api_bp = Blueprint("api", __name__, url_prefix="/api/media")

# Import route modules so their @api_bp decorators execute
from api import routes_media      # noqa: F401, E402
from api import routes_exchange   # noqa: F401, E402
from api import errors            # noqa: F401, E402
