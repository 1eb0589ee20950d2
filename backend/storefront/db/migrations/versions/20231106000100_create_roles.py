"""create roles table

Revision ID: 20231106000100
Revises:
Create Date: 2023-11-06 00:01:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '20231106000100'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'roles',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True, nullable=False),
        sa.Column('roleId', sa.String(length=255), nullable=False),
        sa.Column('roleName', sa.String(length=255), nullable=False),
        sa.Column('createdAt', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column('updatedAt', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.PrimaryKeyConstraint('id', name='pk_roles'),
        sa.UniqueConstraint('roleId', name='uq_roles_roleId'),
    )


def downgrade() -> None:
    op.drop_table('roles')
