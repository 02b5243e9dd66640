from typing import Optional

from sqlmodel import SQLModel, Field
from sqlalchemy import TEXT


class Page(SQLModel, table=True):
    __tablename__ = "Pages"
    # Ids of deleted pages must never be handed out again
    __table_args__ = {"sqlite_autoincrement": True}

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=255, unique=True)
    content: str = Field(sa_type=TEXT)
