from __future__ import annotations
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision = "20251201_0001"
down_revision = None
branch_labels = None
depends_on = None

def upgrade() -> None:
    op.create_table(
        "scan_results",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True, nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("verdict", sa.String(16), nullable=False),
        sa.Column("message", sa.Text(), nullable=False, server_default=""),
        sa.Column("score", sa.Integer(), nullable=False),
        sa.Column("country", sa.String(2), nullable=True),
        sa.Column("timestamp", sa.TIMESTAMP(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.CheckConstraint("score >= 0 AND score <= 100", name="ck_scan_results_score_range"),
        sa.CheckConstraint("verdict IN ('NAUGHTY', 'NICE')", name="ck_scan_results_verdict"),
    )
    # leaderboard reads: ORDER BY score DESC, timestamp ASC
    op.create_index("ix_scan_results_score_timestamp", "scan_results", ["score", "timestamp"])

def downgrade() -> None:
    op.drop_index("ix_scan_results_score_timestamp", table_name="scan_results")
    op.drop_table("scan_results")
