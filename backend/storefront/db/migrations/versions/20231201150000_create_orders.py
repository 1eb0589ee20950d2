"""create orders table

Revision ID: 20231201150000
Revises: 20231201140000
Create Date: 2023-12-01 15:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '20231201150000'
down_revision = '20231201140000'
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'orders',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True, nullable=False),
        sa.Column('orderId', sa.String(length=255), nullable=False),
        sa.Column('userId', sa.Integer(), nullable=False),
        sa.Column('voucherId', sa.Integer(), nullable=True),
        sa.Column('totalPrice', sa.Integer(), nullable=False),
        sa.Column('payment', sa.String(length=255), nullable=False),
        sa.Column('deliveryAddress', sa.Text(), nullable=False),
        sa.Column('status', sa.Integer(), nullable=False, server_default=sa.text('0')),   # 0 待确认 1 已确认 2 配送中 3 已送达
        sa.Column('createdAt', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column('updatedAt', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.PrimaryKeyConstraint('id', name='pk_orders'),
        sa.UniqueConstraint('orderId', name='uq_orders_orderId'),
        sa.ForeignKeyConstraint(
            ['userId'], ['users.id'],
            name='fk_orders_userId_users',
            onupdate='CASCADE',
            ondelete='CASCADE',
        ),
        # 券被删时订单保留
        sa.ForeignKeyConstraint(
            ['voucherId'], ['vouchers.id'],
            name='fk_orders_voucherId_vouchers',
            onupdate='CASCADE',
            ondelete='SET NULL',
        ),
    )


def downgrade() -> None:
    op.drop_table('orders')
