from datetime import datetime
from typing import Any
from uuid import uuid4

from sqlalchemy import JSON, DateTime, String, func
from sqlalchemy.orm import Mapped, mapped_column


def new_id() -> str:
    return uuid4().hex


class DocumentMixin:
    """A schema-less record: generated id plus the caller's fields as JSON."""

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=new_id)
    data: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False, default=dict)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
