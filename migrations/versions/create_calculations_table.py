"""Create calculations and log_entry tables

Revision ID: 3f9c2a7d81b4
Revises:
Create Date: 2026-10-19 09:30:00.000000

"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "3f9c2a7d81b4"
down_revision = None
branch_labels = None
depends_on = None


calculation_operation = sa.Enum(
    "add", "subtract", "multiply", "divide", name="calculation_operation"
)


def upgrade():
    op.create_table(
        "calculations",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("first_number", sa.Float(), nullable=False),
        sa.Column("second_number", sa.Float(), nullable=False),
        sa.Column("operation", calculation_operation, nullable=False),
        sa.Column("result", sa.Float(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    # History is always read newest first
    op.create_index(
        "ix_calculations_created_at", "calculations", ["created_at"], unique=False
    )

    op.create_table(
        "log_entry",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("timestamp", sa.DateTime(), nullable=False),
        sa.Column("project", sa.String(length=50), nullable=True),
        sa.Column("category", sa.String(length=100), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )


def downgrade():
    op.drop_table("log_entry")
    op.drop_index("ix_calculations_created_at", table_name="calculations")
    op.drop_table("calculations")
    # PostgreSQL keeps the enum type around after the table is gone
    calculation_operation.drop(op.get_bind(), checkfirst=True)
