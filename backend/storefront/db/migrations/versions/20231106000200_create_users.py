"""create users table

Revision ID: 20231106000200
Revises: 20231106000100
Create Date: 2023-11-06 00:02:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '20231106000200'
down_revision = '20231106000100'
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True, nullable=False),
        sa.Column('userName', sa.String(length=255), nullable=False),
        sa.Column('password', sa.String(length=255), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('avatar', sa.String(length=255), nullable=True),
        sa.Column('avatarId', sa.String(length=255), nullable=True),
        sa.Column('phoneNumber', sa.String(length=255), nullable=True),
        sa.Column('birthday', sa.Date(), nullable=True),
        # OTP 用字符串，保留前导 0（"012345"）
        sa.Column('otpCode', sa.String(length=255), nullable=True),
        sa.Column('timeOtp', sa.DateTime(timezone=True), nullable=True),
        sa.Column('roleId', sa.Integer(), nullable=False),
        sa.Column('tokenRegister', sa.String(length=255), nullable=True),
        sa.Column('status', sa.Integer(), nullable=False, server_default=sa.text('0')),
        sa.Column('createdAt', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column('updatedAt', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.PrimaryKeyConstraint('id', name='pk_users'),
        sa.UniqueConstraint('email', name='uq_users_email'),
        sa.ForeignKeyConstraint(
            ['roleId'], ['roles.id'],
            name='fk_users_roleId_roles',
            onupdate='CASCADE',
            ondelete='CASCADE',
        ),
    )


def downgrade() -> None:
    op.drop_table('users')
