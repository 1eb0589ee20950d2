"""create feedbacks table

Revision ID: 20231201170000
Revises: 20231201160000
Create Date: 2023-12-01 17:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '20231201170000'
down_revision = '20231201160000'
branch_labels = None
depends_on = None


UNIQUE_USER_PRODUCT_FEEDBACK = 'unique_user_product_feedback_constraint'


def upgrade() -> None:
    op.create_table(
        'feedbacks',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True, nullable=False),
        sa.Column('userId', sa.Integer(), nullable=False),
        sa.Column('productId', sa.Integer(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('rating', sa.Integer(), nullable=False),
        sa.Column('createdAt', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column('updatedAt', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.PrimaryKeyConstraint('id', name='pk_feedbacks'),
        sa.ForeignKeyConstraint(
            ['userId'], ['users.id'],
            name='fk_feedbacks_userId_users',
            onupdate='CASCADE',
            ondelete='CASCADE',
        ),
        sa.ForeignKeyConstraint(
            ['productId'], ['products.id'],
            name='fk_feedbacks_productId_products',
            onupdate='CASCADE',
            ondelete='CASCADE',
        ),
    )

    with op.batch_alter_table('feedbacks') as batch_op:
        batch_op.create_unique_constraint(UNIQUE_USER_PRODUCT_FEEDBACK, ['userId', 'productId'])


def downgrade() -> None:
    op.drop_table('feedbacks')
