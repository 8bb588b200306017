"""
services - Persistence layer sitting between API/exchange and DB.
"""

from services.media_store import MediaStore      # noqa: F401
