"""Initial schema

Revision ID: 0000_initial
Revises:
Create Date: 2026-10-18

"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '0000_initial'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'users',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('username', sa.String(length=80), nullable=False),
        sa.Column('password', sa.String(length=255), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
    )
    op.create_index('ix_users_username', 'users', ['username'], unique=True)

    op.create_table(
        'tools',
        sa.Column('id', sa.String(length=64), primary_key=True),
        sa.Column('name', sa.String(length=120), nullable=False),
        sa.Column('category', sa.String(length=40), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('icon', sa.String(length=80), nullable=False),
        sa.Column('is_bookmarked', sa.Boolean(), nullable=True),
        sa.Column('usage_count', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('last_used', sa.DateTime(), nullable=True),
    )
    op.create_index('ix_tools_category', 'tools', ['category'], unique=False)

    op.create_table(
        'tool_usage',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('tool_id', sa.String(length=64), sa.ForeignKey('tools.id', ondelete='CASCADE')),
        sa.Column('user_id', sa.String(length=36), sa.ForeignKey('users.id', ondelete='SET NULL')),
        sa.Column('used_at', sa.DateTime(), nullable=True),
        sa.Column('metadata', sa.JSON(), nullable=True),
    )
    op.create_index('ix_tool_usage_tool_id', 'tool_usage', ['tool_id'], unique=False)
    op.create_index('ix_tool_usage_user_id', 'tool_usage', ['user_id'], unique=False)
    op.create_index('ix_tool_usage_used_at', 'tool_usage', ['used_at'], unique=False)

    op.create_table(
        'bookmarks',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('tool_id', sa.String(length=64), sa.ForeignKey('tools.id', ondelete='CASCADE')),
        sa.Column('user_id', sa.String(length=36), sa.ForeignKey('users.id', ondelete='CASCADE')),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.UniqueConstraint('tool_id', 'user_id', name='uq_bookmarks_tool_user'),
    )
    op.create_index('ix_bookmarks_tool_id', 'bookmarks', ['tool_id'], unique=False)
    op.create_index('ix_bookmarks_user_id', 'bookmarks', ['user_id'], unique=False)

    op.create_table(
        'shared_files',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('filename', sa.String(length=255), nullable=False),
        sa.Column('original_name', sa.String(length=255), nullable=False),
        sa.Column('mime_type', sa.String(length=120), nullable=False),
        sa.Column('file_size', sa.Integer(), nullable=False),
        sa.Column('uploaded_at', sa.DateTime(), nullable=True),
        sa.Column('expires_at', sa.DateTime(), nullable=True),
        sa.Column('download_count', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('max_downloads', sa.Integer(), nullable=True),
        sa.Column('is_public', sa.Boolean(), nullable=True),
    )
    op.create_index('ix_shared_files_expires_at', 'shared_files', ['expires_at'], unique=False)

    op.create_table(
        'shared_texts',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('title', sa.String(length=200), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('uploaded_at', sa.DateTime(), nullable=True),
        sa.Column('expires_at', sa.DateTime(), nullable=True),
        sa.Column('view_count', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('max_views', sa.Integer(), nullable=True),
        sa.Column('is_public', sa.Boolean(), nullable=True),
    )
    op.create_index('ix_shared_texts_expires_at', 'shared_texts', ['expires_at'], unique=False)


def downgrade():
    op.drop_index('ix_shared_texts_expires_at', table_name='shared_texts')
    op.drop_table('shared_texts')
    op.drop_index('ix_shared_files_expires_at', table_name='shared_files')
    op.drop_table('shared_files')
    op.drop_index('ix_bookmarks_user_id', table_name='bookmarks')
    op.drop_index('ix_bookmarks_tool_id', table_name='bookmarks')
    op.drop_table('bookmarks')
    op.drop_index('ix_tool_usage_used_at', table_name='tool_usage')
    op.drop_index('ix_tool_usage_user_id', table_name='tool_usage')
    op.drop_index('ix_tool_usage_tool_id', table_name='tool_usage')
    op.drop_table('tool_usage')
    op.drop_index('ix_tools_category', table_name='tools')
    op.drop_table('tools')
    op.drop_index('ix_users_username', table_name='users')
    op.drop_table('users')
