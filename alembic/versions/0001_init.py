import sqlalchemy as sa
from alembic import op
from vdash.models.notes import FULL_TEXT_DDL, FULL_TEXT_DROP_DDL

# revision identifiers, used by Alembic.
revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "notes",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("video_id", sa.String, nullable=False, index=True),
        sa.Column("text", sa.Text, nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True)),
        sa.Column("updated_at", sa.DateTime(timezone=True)),
        sqlite_autoincrement=True,
    )
    op.create_table(
        "note_tags",
        sa.Column(
            "note_id",
            sa.Integer,
            sa.ForeignKey("notes.id", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column("tag", sa.String, primary_key=True, index=True),
    )
    op.create_table(
        "event_logs",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("video_id", sa.String, nullable=True, index=True),
        sa.Column("action", sa.String, nullable=False),
        sa.Column("details", sa.JSON),
        sa.Column("timestamp", sa.DateTime(timezone=True), index=True),
    )
    for stmt in FULL_TEXT_DDL.get(op.get_bind().dialect.name, []):
        op.execute(stmt)


def downgrade() -> None:
    for stmt in FULL_TEXT_DROP_DDL.get(op.get_bind().dialect.name, []):
        op.execute(stmt)
    op.drop_table("event_logs")
    op.drop_table("note_tags")
    op.drop_table("notes")
