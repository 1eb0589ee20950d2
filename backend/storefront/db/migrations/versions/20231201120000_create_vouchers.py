"""create vouchers table

Revision ID: 20231201120000
Revises: 20231201110000
Create Date: 2023-12-01 12:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '20231201120000'
down_revision = '20231201110000'
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'vouchers',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True, nullable=False),
        sa.Column('voucherId', sa.String(length=255), nullable=False),
        sa.Column('image', sa.String(length=255), nullable=True),
        sa.Column('imageId', sa.String(length=255), nullable=True),
        sa.Column('voucherPrice', sa.Integer(), nullable=False),
        sa.Column('quantity', sa.Integer(), nullable=False),
        sa.Column('timeStart', sa.DateTime(timezone=True), nullable=False),
        sa.Column('timeEnd', sa.DateTime(timezone=True), nullable=False),
        sa.Column('createdAt', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column('updatedAt', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.PrimaryKeyConstraint('id', name='pk_vouchers'),
        sa.UniqueConstraint('voucherId', name='uq_vouchers_voucherId'),
    )


def downgrade() -> None:
    op.drop_table('vouchers')
