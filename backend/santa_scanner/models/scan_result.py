from __future__ import annotations
import uuid
from datetime import datetime
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import String, Text, Integer, DateTime, Uuid, CheckConstraint, Index, func
from santa_scanner.db import Base


class ScanResult(Base):
    __tablename__ = "scan_results"

    id: Mapped[uuid.UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    verdict: Mapped[str] = mapped_column(String(16), nullable=False)  # 'NAUGHTY' | 'NICE'
    message: Mapped[str] = mapped_column(Text(), nullable=False, default="")
    score: Mapped[int] = mapped_column(Integer(), nullable=False)
    country: Mapped[str | None] = mapped_column(String(2), nullable=True)
    timestamp: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    __table_args__ = (
        CheckConstraint("score >= 0 AND score <= 100", name="ck_scan_results_score_range"),
        CheckConstraint("verdict IN ('NAUGHTY', 'NICE')", name="ck_scan_results_verdict"),
        Index("ix_scan_results_score_timestamp", "score", "timestamp"),
    )
