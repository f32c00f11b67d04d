"""Survey response model."""

from typing import List, Optional

from sqlalchemy import JSON, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from podsurvey.models.base import Base


class Survey(Base):
    """One submitted survey response."""

    __tablename__ = "surveys"

    name: Mapped[str] = mapped_column(String(200), default="", nullable=False)  # "" means anonymous
    topics: Mapped[List[str]] = mapped_column(JSON, default=list, nullable=False)
    description: Mapped[str] = mapped_column(Text, default="", nullable=False)
    podcast_formats: Mapped[List[str]] = mapped_column(JSON, default=list, nullable=False)
    suggested_guest: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)

    def __repr__(self) -> str:
        return f"<Survey {self.id} ({self.created_at})>"
