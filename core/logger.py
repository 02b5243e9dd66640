import logging

from core.config import DB_ECHO, LOG_FORMAT, LOG_LEVEL

logging.basicConfig(level=getattr(logging, LOG_LEVEL.upper()), format=LOG_FORMAT)

# Silence SQL logs
if not DB_ECHO:
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
