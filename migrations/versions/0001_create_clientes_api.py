"""cria tabela clientes_api

Revision ID: 0001
Revises:
Create Date: 2026-10-19 10:00:00

"""
from alembic import op
import sqlalchemy as sa

revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "clientes_api",
        sa.Column("cnpj", sa.String(length=32), primary_key=True),
        sa.Column("nome", sa.String(length=255), nullable=False),
        sa.Column("secret_enc", sa.String(length=512), nullable=False),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now()),
    )
    op.create_index("ix_clientes_api_nome", "clientes_api", ["nome"])


def downgrade() -> None:
    op.drop_index("ix_clientes_api_nome", table_name="clientes_api")
    op.drop_table("clientes_api")
