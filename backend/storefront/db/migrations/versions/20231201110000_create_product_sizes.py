"""create product_sizes table

Revision ID: 20231201110000
Revises: 20231201100000
Create Date: 2023-12-01 11:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '20231201110000'
down_revision = '20231201100000'
branch_labels = None
depends_on = None


UNIQUE_PRODUCT_SIZE = 'unique_product_size_constraint'


def upgrade() -> None:
    op.create_table(
        'product_sizes',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True, nullable=False),
        sa.Column('productId', sa.Integer(), nullable=False),
        sa.Column('sizeId', sa.Integer(), nullable=False),
        sa.Column('quantity', sa.Integer(), nullable=False),
        sa.Column('sold', sa.Integer(), nullable=False, server_default=sa.text('0')),
        sa.Column('createdAt', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column('updatedAt', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.PrimaryKeyConstraint('id', name='pk_product_sizes'),
        sa.ForeignKeyConstraint(
            ['productId'], ['products.id'],
            name='fk_product_sizes_productId_products',
            onupdate='CASCADE',
            ondelete='CASCADE',
        ),
        sa.ForeignKeyConstraint(
            ['sizeId'], ['sizes.id'],
            name='fk_product_sizes_sizeId_sizes',
            onupdate='CASCADE',
            ondelete='CASCADE',
        ),
    )

    # 同一商品同一尺码只有一行库存
    with op.batch_alter_table('product_sizes') as batch_op:
        batch_op.create_unique_constraint(UNIQUE_PRODUCT_SIZE, ['productId', 'sizeId'])


def downgrade() -> None:
    op.drop_table('product_sizes')
