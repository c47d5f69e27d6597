"""normalize video locators

Rewrites legacy "bucket,key" and virtual-hosted URL values of
videos.video_url into the "bucket/key" form. Values that cannot be
interpreted are cleared so they never reach the presigner.

Revision ID: 20261019_0002
Revises: 20261019_0001
Create Date: 2026-10-19
"""

from alembic import op
import sqlalchemy as sa

from videohub.services.locator import normalize_legacy_locator


revision = "20261019_0002"
down_revision = "20261019_0001"
branch_labels = None
depends_on = None


videos = sa.table(
    "videos",
    sa.column("id", sa.UUID()),
    sa.column("video_url", sa.String()),
)


def upgrade() -> None:
    conn = op.get_bind()
    rows = conn.execute(sa.select(videos.c.id, videos.c.video_url).where(videos.c.video_url.is_not(None)))
    for video_id, value in rows.fetchall():
        normalized = normalize_legacy_locator(value)
        if normalized != value:
            conn.execute(videos.update().where(videos.c.id == video_id).values(video_url=normalized))


def downgrade() -> None:
    # Legacy forms are not restored.
    pass
