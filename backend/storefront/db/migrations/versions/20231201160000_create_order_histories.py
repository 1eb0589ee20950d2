"""create order_histories table

Revision ID: 20231201160000
Revises: 20231201150000
Create Date: 2023-12-01 16:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '20231201160000'
down_revision = '20231201150000'
branch_labels = None
depends_on = None


UNIQUE_ORDER_PRODUCT_SIZE = 'unique_order_product_size_constraint'


def upgrade() -> None:
    op.create_table(
        'order_histories',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True, nullable=False),
        sa.Column('orderId', sa.Integer(), nullable=False),
        sa.Column('productId', sa.Integer(), nullable=False),
        sa.Column('sizeId', sa.Integer(), nullable=False),
        sa.Column('quantity', sa.Integer(), nullable=False),
        sa.Column('totalPrice', sa.Integer(), nullable=False),
        sa.Column('statusFeedback', sa.Integer(), nullable=False, server_default=sa.text('0')),
        sa.Column('createdAt', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column('updatedAt', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.PrimaryKeyConstraint('id', name='pk_order_histories'),
        sa.ForeignKeyConstraint(
            ['orderId'], ['orders.id'],
            name='fk_order_histories_orderId_orders',
            onupdate='CASCADE',
            ondelete='CASCADE',
        ),
        sa.ForeignKeyConstraint(
            ['productId'], ['products.id'],
            name='fk_order_histories_productId_products',
            onupdate='CASCADE',
            ondelete='CASCADE',
        ),
        sa.ForeignKeyConstraint(
            ['sizeId'], ['sizes.id'],
            name='fk_order_histories_sizeId_sizes',
            onupdate='CASCADE',
            ondelete='CASCADE',
        ),
    )

    with op.batch_alter_table('order_histories') as batch_op:
        batch_op.create_unique_constraint(UNIQUE_ORDER_PRODUCT_SIZE, ['orderId', 'productId', 'sizeId'])


def downgrade() -> None:
    op.drop_table('order_histories')
