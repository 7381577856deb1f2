"""Create the entries table."""

from alembic import op
import sqlalchemy as sa

revision = "20261017_000001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "entries",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("customer_name", sa.String(length=100), nullable=True),
        sa.Column("occurred_on", sa.Date(), nullable=False),
        sa.Column("payment_date", sa.Date(), nullable=True),
        sa.Column("deposit_due_on", sa.Date(), nullable=True),
        sa.Column("payment_completed", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("deposit_completed", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column(
            "kind",
            sa.Enum("sales", "cost", name="entry_kind_enum"),
            nullable=False,
        ),
        sa.Column("amount", sa.Numeric(19, 4), nullable=False),
        sa.Column("note", sa.String(length=80), nullable=False, server_default=""),
        sa.Column("created_at", sa.DateTime(), nullable=False),
    )
    op.create_index("ix_entries_customer_name", "entries", ["customer_name"])
    op.create_index("ix_entries_occurred_on", "entries", ["occurred_on"])


def downgrade() -> None:
    op.drop_index("ix_entries_occurred_on", table_name="entries")
    op.drop_index("ix_entries_customer_name", table_name="entries")
    op.drop_table("entries")
    sa.Enum(name="entry_kind_enum").drop(op.get_bind(), checkfirst=True)
