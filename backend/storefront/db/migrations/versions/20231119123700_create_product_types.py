"""create product_types table

Revision ID: 20231119123700
Revises: 20231106004400
Create Date: 2023-11-19 12:37:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '20231119123700'
down_revision = '20231106004400'
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'product_types',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True, nullable=False),
        sa.Column('productTypeId', sa.String(length=255), nullable=False),
        sa.Column('productTypeName', sa.String(length=255), nullable=False),
        sa.Column('createdAt', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column('updatedAt', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.PrimaryKeyConstraint('id', name='pk_product_types'),
        sa.UniqueConstraint('productTypeId', name='uq_product_types_productTypeId'),
    )


def downgrade() -> None:
    op.drop_table('product_types')
