"""Initial schema

Revision ID: 4f1a2b7c9d10
Revises:
Create Date: 2026-10-19 09:12:44.101233
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = '4f1a2b7c9d10'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

string_list = sa.JSON().with_variant(postgresql.JSONB(), 'postgresql')


def _created_at() -> sa.Column:
    return sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False)


def upgrade() -> None:
    """Upgrade schema."""

    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('username', sa.String(50), nullable=False),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('password', sa.String(255), nullable=False),
        sa.Column('full_name', sa.String(255), nullable=False),
        sa.Column('bio', sa.Text(), nullable=True),
        sa.Column('field_experience', sa.Text(), nullable=True),
        sa.Column('skills', string_list, nullable=True),
        sa.Column('education', sa.Text(), nullable=True),
        sa.Column('location', sa.String(255), nullable=True),
        sa.Column('availability', sa.String(255), nullable=True),
        sa.Column('profile_picture', sa.String(500), nullable=True),
        _created_at(),
    )
    op.create_index('ix_users_id', 'users', ['id'])
    op.create_index('ix_users_username', 'users', ['username'], unique=True)
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table(
        'forum_categories',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(120), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('icon', sa.String(64), nullable=False),
        sa.Column('color', sa.String(64), nullable=False),
        _created_at(),
    )
    op.create_index('ix_forum_categories_id', 'forum_categories', ['id'])

    op.create_table(
        'forum_posts',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('author_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('category_id', sa.Integer(), sa.ForeignKey('forum_categories.id'), nullable=False),
        _created_at(),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index('ix_forum_posts_id', 'forum_posts', ['id'])
    op.create_index('ix_forum_posts_author_id', 'forum_posts', ['author_id'])
    op.create_index('ix_forum_posts_category_id', 'forum_posts', ['category_id'])

    op.create_table(
        'forum_replies',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('author_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('post_id', sa.Integer(), sa.ForeignKey('forum_posts.id'), nullable=False),
        _created_at(),
    )
    op.create_index('ix_forum_replies_id', 'forum_replies', ['id'])
    op.create_index('ix_forum_replies_author_id', 'forum_replies', ['author_id'])
    op.create_index('ix_forum_replies_post_id', 'forum_replies', ['post_id'])

    op.create_table(
        'jobs',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('company', sa.String(255), nullable=False),
        sa.Column('location', sa.String(255), nullable=False),
        sa.Column('type', sa.String(64), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('requirements', string_list, nullable=True),
        sa.Column('salary', sa.String(120), nullable=True),
        sa.Column('contact_email', sa.String(255), nullable=False),
        sa.Column('posted_by_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        _created_at(),
        sa.Column('expires_at', sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index('ix_jobs_id', 'jobs', ['id'])
    op.create_index('ix_jobs_posted_by_id', 'jobs', ['posted_by_id'])

    op.create_table(
        'resources',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('category', sa.String(120), nullable=False),
        sa.Column('file_url', sa.String(500), nullable=True),
        sa.Column('file_name', sa.String(255), nullable=True),
        sa.Column('file_size', sa.String(64), nullable=True),
        sa.Column('uploaded_by_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('download_count', sa.Integer(), server_default='0', nullable=False),
        _created_at(),
    )
    op.create_index('ix_resources_id', 'resources', ['id'])
    op.create_index('ix_resources_category', 'resources', ['category'])
    op.create_index('ix_resources_uploaded_by_id', 'resources', ['uploaded_by_id'])

    op.create_table(
        'events',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('location', sa.String(255), nullable=False),
        sa.Column('date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('image_url', sa.String(500), nullable=True),
        sa.Column('max_attendees', sa.Integer(), nullable=True),
        sa.Column('registration_count', sa.Integer(), server_default='0', nullable=False),
        sa.Column('organizer_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        _created_at(),
    )
    op.create_index('ix_events_id', 'events', ['id'])
    op.create_index('ix_events_date', 'events', ['date'])
    op.create_index('ix_events_organizer_id', 'events', ['organizer_id'])

    op.create_table(
        'event_registrations',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('event_id', sa.Integer(), sa.ForeignKey('events.id'), nullable=False),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        _created_at(),
        sa.UniqueConstraint('event_id', 'user_id', name='uq_event_registration_event_user'),
    )
    op.create_index('ix_event_registrations_id', 'event_registrations', ['id'])
    op.create_index('ix_event_registrations_event_id', 'event_registrations', ['event_id'])
    op.create_index('ix_event_registrations_user_id', 'event_registrations', ['user_id'])

    op.create_table(
        'messages',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('sender_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('receiver_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('subject', sa.String(255), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('is_read', sa.Boolean(), server_default=sa.false(), nullable=False),
        _created_at(),
    )
    op.create_index('ix_messages_id', 'messages', ['id'])
    op.create_index('ix_messages_sender_id', 'messages', ['sender_id'])
    op.create_index('ix_messages_receiver_id', 'messages', ['receiver_id'])


def downgrade() -> None:
    """Downgrade schema."""
    for table in (
        'messages',
        'event_registrations',
        'events',
        'resources',
        'jobs',
        'forum_replies',
        'forum_posts',
        'forum_categories',
        'users',
    ):
        op.drop_table(table)
