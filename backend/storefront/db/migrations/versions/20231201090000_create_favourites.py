"""create favourites table

Revision ID: 20231201090000
Revises: 20231119124000
Create Date: 2023-12-01 09:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '20231201090000'
down_revision = '20231119124000'
branch_labels = None
depends_on = None


UNIQUE_USER_PRODUCT = 'unique_user_product_favourite_constraint'


def upgrade() -> None:
    op.create_table(
        'favourites',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True, nullable=False),
        sa.Column('userId', sa.Integer(), nullable=False),
        sa.Column('productId', sa.Integer(), nullable=False),
        sa.Column('createdAt', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column('updatedAt', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.PrimaryKeyConstraint('id', name='pk_favourites'),
        sa.ForeignKeyConstraint(
            ['userId'], ['users.id'],
            name='fk_favourites_userId_users',
            onupdate='CASCADE',
            ondelete='CASCADE',
        ),
        sa.ForeignKeyConstraint(
            ['productId'], ['products.id'],
            name='fk_favourites_productId_products',
            onupdate='CASCADE',
            ondelete='CASCADE',
        ),
    )

    # 一个用户对同一商品最多收藏一次；用唯一约束而不是复合主键，主键保持单列
    # batch：PostgreSQL 直接 ALTER，SQLite 重建表
    with op.batch_alter_table('favourites') as batch_op:
        batch_op.create_unique_constraint(UNIQUE_USER_PRODUCT, ['userId', 'productId'])


def downgrade() -> None:
    op.drop_table('favourites')
