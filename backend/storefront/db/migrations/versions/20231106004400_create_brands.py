"""create brands table

Revision ID: 20231106004400
Revises: 20231106000200
Create Date: 2023-11-06 00:44:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '20231106004400'
down_revision = '20231106000200'
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'brands',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True, nullable=False),
        sa.Column('brandId', sa.String(length=255), nullable=False),
        sa.Column('brandName', sa.String(length=255), nullable=False),
        sa.Column('createdAt', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column('updatedAt', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.PrimaryKeyConstraint('id', name='pk_brands'),
        sa.UniqueConstraint('brandId', name='uq_brands_brandId'),
    )


def downgrade() -> None:
    op.drop_table('brands')
