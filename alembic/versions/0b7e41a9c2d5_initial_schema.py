"""initial schema (users, images, ads, comments)

Revision ID: 0b7e41a9c2d5
Revises:
Create Date: 2026-10-19 10:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0b7e41a9c2d5'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('username', sa.String(length=32), nullable=False),
        sa.Column('password', sa.String(), nullable=False),
        sa.Column('first_name', sa.String(length=16), nullable=False),
        sa.Column('last_name', sa.String(length=16), nullable=False),
        sa.Column('phone', sa.String(), nullable=False),
        sa.Column('role', sa.Enum('USER', 'ADMIN', name='role'), nullable=False),
        sa.Column('image', sa.String(), nullable=True),
        sa.UniqueConstraint('phone', name='uq_users_phone'),
    )
    op.create_index('ix_users_id', 'users', ['id'])
    op.create_index('ix_users_username', 'users', ['username'], unique=True)

    op.create_table(
        'images',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('data', sa.LargeBinary(), nullable=False),
    )
    op.create_index('ix_images_id', 'images', ['id'])

    op.create_table(
        'ads',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('author_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('title', sa.String(length=32), nullable=False),
        sa.Column('price', sa.Integer(), nullable=False),
        sa.Column('description', sa.String(length=64), nullable=False),
        sa.Column('image', sa.String(), nullable=False),
    )
    op.create_index('ix_ads_id', 'ads', ['id'])
    op.create_index('ix_ads_author_id', 'ads', ['author_id'])

    op.create_table(
        'comments',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('ad_id', sa.Integer(), sa.ForeignKey('ads.id', ondelete='CASCADE'), nullable=False),
        sa.Column('author_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('text', sa.String(length=64), nullable=False),
        sa.Column('created_at', sa.BigInteger(), nullable=False),
    )
    op.create_index('ix_comments_id', 'comments', ['id'])
    op.create_index('ix_comments_ad_id', 'comments', ['ad_id'])


def downgrade() -> None:
    # reverse order
    op.drop_index('ix_comments_ad_id')
    op.drop_index('ix_comments_id')
    op.drop_table('comments')
    op.drop_index('ix_ads_author_id')
    op.drop_index('ix_ads_id')
    op.drop_table('ads')
    op.drop_index('ix_images_id')
    op.drop_table('images')
    op.drop_index('ix_users_username')
    op.drop_index('ix_users_id')
    op.drop_table('users')
    sa.Enum(name='role').drop(op.get_bind(), checkfirst=True)
