"""create sizes table

Revision ID: 20231201100000
Revises: 20231201090000
Create Date: 2023-12-01 10:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '20231201100000'
down_revision = '20231201090000'
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'sizes',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True, nullable=False),
        sa.Column('sizeId', sa.String(length=255), nullable=False),
        sa.Column('productTypeId', sa.Integer(), nullable=False),
        sa.Column('sizeName', sa.String(length=255), nullable=False),
        sa.Column('createdAt', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column('updatedAt', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.PrimaryKeyConstraint('id', name='pk_sizes'),
        sa.UniqueConstraint('sizeId', name='uq_sizes_sizeId'),
        sa.ForeignKeyConstraint(
            ['productTypeId'], ['product_types.id'],
            name='fk_sizes_productTypeId_product_types',
            onupdate='CASCADE',
            ondelete='CASCADE',
        ),
    )


def downgrade() -> None:
    op.drop_table('sizes')
