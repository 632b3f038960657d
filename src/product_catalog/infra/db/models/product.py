from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, Float, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from product_catalog.infra.db.models.base import Base


class ProductRow(Base):
    __tablename__ = "products"

    # 24-char hex identity carried over from the original document ids
    id: Mapped[str] = mapped_column(String(24), primary_key=True)
    product_name: Mapped[str] = mapped_column(String(200), nullable=False, index=True)
    brand_name: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    category: Mapped[str] = mapped_column(String(100), nullable=False, index=True)

    price: Mapped[float] = mapped_column(Float, nullable=False, index=True)
    creation_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        index=True,
    )

    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    product_image: Mapped[str | None] = mapped_column(Text, nullable=True)
    ratings: Mapped[float | None] = mapped_column(Float, nullable=True)
