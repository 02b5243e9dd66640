from pathlib import Path

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from core.config import DATABASE_URL, DB_ECHO, DB_POOL_SIZE


def create_engine(url: str = DATABASE_URL, **kwargs) -> AsyncEngine:
    """Create the async engine that owns the connection pool"""
    sa_url = make_url(url)

    if sa_url.get_backend_name() == "sqlite":
        # sqlite creates the file but not its directory
        if sa_url.database and sa_url.database != ":memory:":
            Path(sa_url.database).parent.mkdir(parents=True, exist_ok=True)
    else:
        kwargs.setdefault("pool_size", DB_POOL_SIZE)
        kwargs.setdefault("pool_pre_ping", True)

    kwargs.setdefault("echo", DB_ECHO)
    return create_async_engine(url, **kwargs)


engine = create_engine()
