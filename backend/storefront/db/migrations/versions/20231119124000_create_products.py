"""create products table

Revision ID: 20231119124000
Revises: 20231119123700
Create Date: 2023-11-19 12:40:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '20231119124000'
down_revision = '20231119123700'
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'products',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True, nullable=False),
        sa.Column('productId', sa.String(length=255), nullable=False),
        sa.Column('productTypeId', sa.Integer(), nullable=False),
        sa.Column('brandId', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('image', sa.String(length=255), nullable=True),
        sa.Column('imageId', sa.String(length=255), nullable=True),
        sa.Column('price', sa.Integer(), nullable=False),
        sa.Column('discount', sa.Integer(), nullable=True, server_default=sa.text('0')),
        sa.Column('rating', sa.Integer(), nullable=True, server_default=sa.text('0')),
        sa.Column('descriptionContent', sa.Text(), nullable=True),
        sa.Column('descriptionHTML', sa.Text(), nullable=True),
        sa.Column('createdAt', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column('updatedAt', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.PrimaryKeyConstraint('id', name='pk_products'),
        sa.UniqueConstraint('productId', name='uq_products_productId'),
        sa.ForeignKeyConstraint(
            ['productTypeId'], ['product_types.id'],
            name='fk_products_productTypeId_product_types',
            onupdate='CASCADE',
            ondelete='CASCADE',
        ),
        sa.ForeignKeyConstraint(
            ['brandId'], ['brands.id'],
            name='fk_products_brandId_brands',
            onupdate='CASCADE',
            ondelete='CASCADE',
        ),
    )


def downgrade() -> None:
    op.drop_table('products')
