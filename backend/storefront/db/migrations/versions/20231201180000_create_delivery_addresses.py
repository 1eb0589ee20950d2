"""create delivery_addresses table

Revision ID: 20231201180000
Revises: 20231201170000
Create Date: 2023-12-01 18:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '20231201180000'
down_revision = '20231201170000'
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'delivery_addresses',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True, nullable=False),
        sa.Column('userId', sa.Integer(), nullable=False),
        sa.Column('address', sa.String(length=255), nullable=False),
        sa.Column('createdAt', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column('updatedAt', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.PrimaryKeyConstraint('id', name='pk_delivery_addresses'),
        sa.ForeignKeyConstraint(
            ['userId'], ['users.id'],
            name='fk_delivery_addresses_userId_users',
            onupdate='CASCADE',
            ondelete='CASCADE',
        ),
    )


def downgrade() -> None:
    op.drop_table('delivery_addresses')
