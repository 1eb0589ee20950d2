"""create cart_details table

Revision ID: 20231201140000
Revises: 20231201130000
Create Date: 2023-12-01 14:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '20231201140000'
down_revision = '20231201130000'
branch_labels = None
depends_on = None


UNIQUE_CART_PRODUCT_SIZE = 'unique_cart_product_size_constraint'


def upgrade() -> None:
    op.create_table(
        'cart_details',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True, nullable=False),
        sa.Column('cartId', sa.Integer(), nullable=False),
        sa.Column('productId', sa.Integer(), nullable=False),
        sa.Column('sizeId', sa.Integer(), nullable=False),
        sa.Column('quantity', sa.Integer(), nullable=False, server_default=sa.text('1')),
        sa.Column('totalPrice', sa.Integer(), nullable=False),
        sa.Column('createdAt', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column('updatedAt', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.PrimaryKeyConstraint('id', name='pk_cart_details'),
        sa.ForeignKeyConstraint(
            ['cartId'], ['carts.id'],
            name='fk_cart_details_cartId_carts',
            onupdate='CASCADE',
            ondelete='CASCADE',
        ),
        sa.ForeignKeyConstraint(
            ['productId'], ['products.id'],
            name='fk_cart_details_productId_products',
            onupdate='CASCADE',
            ondelete='CASCADE',
        ),
        sa.ForeignKeyConstraint(
            ['sizeId'], ['sizes.id'],
            name='fk_cart_details_sizeId_sizes',
            onupdate='CASCADE',
            ondelete='CASCADE',
        ),
    )

    with op.batch_alter_table('cart_details') as batch_op:
        batch_op.create_unique_constraint(UNIQUE_CART_PRODUCT_SIZE, ['cartId', 'productId', 'sizeId'])


def downgrade() -> None:
    op.drop_table('cart_details')
