"""Create blueprint and contract tables.

Revision ID: a1c3e5f7b9d0
Revises:
Create Date: 2026-10-18

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "a1c3e5f7b9d0"
down_revision = None
branch_labels = None
depends_on = None

FIELD_TYPES = ("text", "date", "signature", "checkbox")
CONTRACT_STATUSES = ("created", "approved", "sent", "signed", "locked", "revoked")


def upgrade() -> None:
    bind = op.get_bind()
    inspector = sa.inspect(bind)
    existing_tables = set(inspector.get_table_names())

    if "blueprints" not in existing_tables:
        op.create_table(
            "blueprints",
            sa.Column("id", sa.Uuid(), primary_key=True),
            sa.Column("name", sa.String(200), nullable=False),
            sa.Column("description", sa.Text(), nullable=True),
            sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
            sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
        )

    if "blueprint_fields" not in existing_tables:
        op.create_table(
            "blueprint_fields",
            sa.Column("id", sa.Uuid(), primary_key=True),
            sa.Column(
                "blueprint_id",
                sa.Uuid(),
                sa.ForeignKey("blueprints.id", ondelete="CASCADE"),
                nullable=False,
            ),
            sa.Column("field_type", sa.Enum(*FIELD_TYPES, name="fieldtype"), nullable=False),
            sa.Column("label", sa.String(200), nullable=False),
            sa.Column("required", sa.Boolean(), nullable=True),
            sa.Column("placeholder", sa.String(200), nullable=True),
            sa.Column("position_x", sa.Float(), nullable=True),
            sa.Column("position_y", sa.Float(), nullable=True),
            sa.Column("width", sa.Float(), nullable=True),
            sa.Column("height", sa.Float(), nullable=True),
            sa.Column("order_index", sa.Integer(), nullable=True),
            sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
        )
        op.create_index(
            "ix_blueprint_fields_blueprint_id", "blueprint_fields", ["blueprint_id"]
        )

    if "contracts" not in existing_tables:
        op.create_table(
            "contracts",
            sa.Column("id", sa.Uuid(), primary_key=True),
            sa.Column("blueprint_id", sa.Uuid(), nullable=False),
            sa.Column("name", sa.String(200), nullable=False),
            sa.Column(
                "status", sa.Enum(*CONTRACT_STATUSES, name="contractstatus"), nullable=False
            ),
            sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
            sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
            sa.Column("approved_at", sa.DateTime(timezone=True), nullable=True),
            sa.Column("sent_at", sa.DateTime(timezone=True), nullable=True),
            sa.Column("signed_at", sa.DateTime(timezone=True), nullable=True),
            sa.Column("locked_at", sa.DateTime(timezone=True), nullable=True),
            sa.Column("revoked_at", sa.DateTime(timezone=True), nullable=True),
        )
        op.create_index("ix_contracts_blueprint_id", "contracts", ["blueprint_id"])

    if "contract_field_values" not in existing_tables:
        op.create_table(
            "contract_field_values",
            sa.Column("id", sa.Uuid(), primary_key=True),
            sa.Column(
                "contract_id",
                sa.Uuid(),
                sa.ForeignKey("contracts.id", ondelete="CASCADE"),
                nullable=False,
            ),
            sa.Column("blueprint_field_id", sa.Uuid(), nullable=False),
            sa.Column("value", sa.Text(), nullable=True),
            sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
            sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
            sa.UniqueConstraint(
                "contract_id",
                "blueprint_field_id",
                name="uq_contract_field_values_contract_field",
            ),
        )
        op.create_index(
            "ix_contract_field_values_contract_id", "contract_field_values", ["contract_id"]
        )


def downgrade() -> None:
    op.drop_table("contract_field_values")
    op.drop_table("contracts")
    op.drop_table("blueprint_fields")
    op.drop_table("blueprints")
    sa.Enum(name="contractstatus").drop(op.get_bind(), checkfirst=True)
    sa.Enum(name="fieldtype").drop(op.get_bind(), checkfirst=True)
