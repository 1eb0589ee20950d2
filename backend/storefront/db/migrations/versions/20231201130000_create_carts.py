"""create carts table

Revision ID: 20231201130000
Revises: 20231201120000
Create Date: 2023-12-01 13:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '20231201130000'
down_revision = '20231201120000'
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'carts',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True, nullable=False),
        sa.Column('cartId', sa.String(length=255), nullable=False),
        sa.Column('userId', sa.Integer(), nullable=False),
        sa.Column('createdAt', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column('updatedAt', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.PrimaryKeyConstraint('id', name='pk_carts'),
        sa.UniqueConstraint('cartId', name='uq_carts_cartId'),
        sa.ForeignKeyConstraint(
            ['userId'], ['users.id'],
            name='fk_carts_userId_users',
            onupdate='CASCADE',
            ondelete='CASCADE',
        ),
    )


def downgrade() -> None:
    op.drop_table('carts')
