"""Create yard tracking tables

Revision ID: 3f1c9a2b7d10
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "3f1c9a2b7d10"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "yards",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("location", sa.String(length=100), nullable=False),
        sa.Column("description", sa.String(length=255), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "motorcycles",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("plate", sa.String(length=7), nullable=False),
        sa.Column("model", sa.String(length=50), nullable=False),
        sa.Column("status", sa.String(length=65), nullable=False),
        sa.Column("registered_at", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("plate"),
    )

    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("email", sa.String(length=100), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("status", sa.String(length=20), nullable=False),
        sa.Column("role", sa.String(length=10), nullable=False),
        sa.Column("yard_id", sa.Integer(), nullable=True),
        sa.CheckConstraint("role IN ('USER', 'ADMIN')", name="ck_users_role"),
        sa.ForeignKeyConstraint(["yard_id"], ["yards.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email"),
    )

    op.create_table(
        "fixed_markers",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("aruco_code", sa.String(length=50), nullable=False),
        sa.Column("x", sa.Float(), nullable=True),
        sa.Column("y", sa.Float(), nullable=True),
        sa.Column("yard_id", sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(["yard_id"], ["yards.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "mobile_markers",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("aruco_code", sa.String(length=50), nullable=False),
        sa.Column("installed_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("motorcycle_id", sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(
            ["motorcycle_id"], ["motorcycles.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "positions",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("recorded_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("x", sa.Float(), nullable=True),
        sa.Column("y", sa.Float(), nullable=True),
        sa.Column("motorcycle_id", sa.Integer(), nullable=True),
        sa.Column("yard_id", sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(
            ["motorcycle_id"], ["motorcycles.id"], ondelete="CASCADE"
        ),
        sa.ForeignKeyConstraint(["yard_id"], ["yards.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "distance_measurements",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("distance_m", sa.Float(), nullable=True),
        sa.Column("position_id", sa.Integer(), nullable=True),
        sa.Column("fixed_marker_id", sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(
            ["position_id"], ["positions.id"], ondelete="CASCADE"
        ),
        sa.ForeignKeyConstraint(
            ["fixed_marker_id"], ["fixed_markers.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_distance_measurements_position_id"),
        "distance_measurements",
        ["position_id"],
        unique=False,
    )
    op.create_index(
        op.f("ix_distance_measurements_fixed_marker_id"),
        "distance_measurements",
        ["fixed_marker_id"],
        unique=False,
    )


def downgrade() -> None:
    op.drop_index(
        op.f("ix_distance_measurements_fixed_marker_id"),
        table_name="distance_measurements",
    )
    op.drop_index(
        op.f("ix_distance_measurements_position_id"),
        table_name="distance_measurements",
    )
    op.drop_table("distance_measurements")
    op.drop_table("positions")
    op.drop_table("mobile_markers")
    op.drop_table("fixed_markers")
    op.drop_table("users")
    op.drop_table("motorcycles")
    op.drop_table("yards")
