"""create catalog tables

Revision ID: 4c1e9a7b2d10
Revises:
Create Date: 2026-10-19 09:12:44.318202

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '4c1e9a7b2d10'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
    ]


def upgrade() -> None:
    op.create_table(
        'counters',
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('seq', sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint('name')
    )

    op.create_table(
        'users',
        sa.Column('id', sa.String(length=32), nullable=False),
        sa.Column('first_name', sa.String(), nullable=True),
        sa.Column('last_name', sa.String(), nullable=True),
        sa.Column('username', sa.String(), nullable=False),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('hashed_password', sa.String(), nullable=False),
        sa.Column('phone', sa.String(), nullable=True),
        sa.Column('dob', sa.Date(), nullable=True),
        sa.Column('role', sa.String(), nullable=False),
        sa.Column('is_confirmed', sa.Boolean(), nullable=False),
        sa.Column('is_deleted', sa.Boolean(), nullable=False),
        sa.Column('progress', sa.JSON(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_users_email'), 'users', ['email'], unique=True)
    op.create_index(op.f('ix_users_username'), 'users', ['username'], unique=False)
    op.create_index(op.f('ix_users_role'), 'users', ['role'], unique=False)

    op.create_table(
        'instructors',
        sa.Column('id', sa.String(length=32), nullable=False),
        sa.Column('external_id', sa.String(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('image', sa.String(), nullable=True),
        sa.Column('job', sa.String(length=255), nullable=True),
        sa.Column('courses_title', sa.JSON(), nullable=False),
        sa.Column('social_media', sa.JSON(), nullable=True),
        sa.Column('description', sa.String(length=1000), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_instructors_external_id'), 'instructors', ['external_id'], unique=True)

    op.create_table(
        'courses',
        sa.Column('id', sa.String(length=32), nullable=False),
        sa.Column('course_id', sa.Integer(), nullable=False),
        sa.Column('instructor_id', sa.String(length=32), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('description', sa.String(length=500), nullable=True),
        sa.Column('category_id', sa.Integer(), nullable=True),
        sa.Column('if_you_like', sa.String(), nullable=True),
        sa.Column('if_you_like_value', sa.String(), nullable=True),
        sa.Column('skills_needed', sa.String(), nullable=True),
        sa.Column('skills_needed_value', sa.String(), nullable=True),
        sa.Column('logo_image', sa.String(), nullable=True),
        sa.Column('organization', sa.String(), nullable=True),
        sa.Column('views', sa.Integer(), nullable=False),
        sa.Column('enrolled', sa.Integer(), nullable=False),
        sa.Column('related_courses', sa.JSON(), nullable=False),
        sa.Column('image', sa.String(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['instructor_id'], ['instructors.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_courses_course_id'), 'courses', ['course_id'], unique=True)
    op.create_index(op.f('ix_courses_instructor_id'), 'courses', ['instructor_id'], unique=False)
    op.create_index(op.f('ix_courses_name'), 'courses', ['name'], unique=False)

    op.create_table(
        'user_courses_association',
        sa.Column('user_id', sa.String(length=32), nullable=False),
        sa.Column('course_id', sa.String(length=32), nullable=False),
        sa.ForeignKeyConstraint(['course_id'], ['courses.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ),
        sa.PrimaryKeyConstraint('user_id', 'course_id')
    )

    op.create_table(
        'modules',
        sa.Column('id', sa.String(length=32), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('duration', sa.String(length=100), nullable=False),
        sa.Column('course_id', sa.String(length=32), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['course_id'], ['courses.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_modules_title'), 'modules', ['title'], unique=False)
    op.create_index(op.f('ix_modules_course_id'), 'modules', ['course_id'], unique=False)

    op.create_table(
        'topics',
        sa.Column('id', sa.String(length=32), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('description', sa.String(length=1000), nullable=True),
        sa.Column('videos', sa.JSON(), nullable=False),
        sa.Column('assignments', sa.JSON(), nullable=False),
        sa.Column('module_id', sa.String(length=32), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['module_id'], ['modules.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_topics_title'), 'topics', ['title'], unique=False)
    op.create_index(op.f('ix_topics_module_id'), 'topics', ['module_id'], unique=False)

    op.create_table(
        'degrees',
        sa.Column('id', sa.String(length=32), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('degree', sa.String(length=255), nullable=False),
        sa.Column('description', sa.String(length=1000), nullable=False),
        sa.Column('duration', sa.String(length=100), nullable=False),
        sa.Column('level', sa.String(length=100), nullable=False),
        sa.Column('subject', sa.String(length=255), nullable=False),
        sa.Column('link', sa.String(), nullable=False),
        sa.Column('img', sa.String(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_degrees_name'), 'degrees', ['name'], unique=False)

    op.create_table(
        'reviews',
        sa.Column('id', sa.String(length=32), nullable=False),
        sa.Column('user_id', sa.String(length=32), nullable=False),
        sa.Column('course_id', sa.String(length=32), nullable=False),
        sa.Column('rating', sa.Integer(), nullable=False),
        sa.Column('review', sa.Text(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['course_id'], ['courses.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id', 'course_id', name='uq_reviews_user_course')
    )
    op.create_index(op.f('ix_reviews_user_id'), 'reviews', ['user_id'], unique=False)
    op.create_index(op.f('ix_reviews_course_id'), 'reviews', ['course_id'], unique=False)

    op.create_table(
        'career_resource_categories',
        sa.Column('id', sa.String(length=32), nullable=False),
        sa.Column('category_name', sa.String(length=255), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_career_resource_categories_category_name'), 'career_resource_categories', ['category_name'], unique=False)

    op.create_table(
        'career_resources',
        sa.Column('id', sa.String(length=32), nullable=False),
        sa.Column('question', sa.String(length=1000), nullable=False),
        sa.Column('answer', sa.Text(), nullable=False),
        sa.Column('category_id', sa.String(length=32), nullable=True),
        sa.Column('date', sa.DateTime(timezone=True), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['category_id'], ['career_resource_categories.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_career_resources_category_id'), 'career_resources', ['category_id'], unique=False)

    op.create_table(
        'success_stories',
        sa.Column('id', sa.String(length=32), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('certificate_name', sa.String(length=255), nullable=False),
        sa.Column('review', sa.String(length=1000), nullable=False),
        sa.Column('date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('person_image', sa.String(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id')
    )

    op.create_table(
        'notifications',
        sa.Column('id', sa.String(length=32), nullable=False),
        sa.Column('type', sa.String(), nullable=False),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('body', sa.Text(), nullable=False),
        sa.Column('subject_id', sa.String(length=32), nullable=True),
        sa.Column('subject_collection', sa.String(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_notifications_type'), 'notifications', ['type'], unique=False)

    op.create_table(
        'notification_recipients',
        sa.Column('notification_id', sa.String(length=32), nullable=False),
        sa.Column('user_id', sa.String(length=32), nullable=False),
        sa.Column('is_read', sa.Boolean(), nullable=False),
        sa.Column('read_at', sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(['notification_id'], ['notifications.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ),
        sa.PrimaryKeyConstraint('notification_id', 'user_id')
    )
    op.create_index(op.f('ix_notification_recipients_user_id'), 'notification_recipients', ['user_id'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_notification_recipients_user_id'), table_name='notification_recipients')
    op.drop_table('notification_recipients')
    op.drop_index(op.f('ix_notifications_type'), table_name='notifications')
    op.drop_table('notifications')
    op.drop_table('success_stories')
    op.drop_index(op.f('ix_career_resources_category_id'), table_name='career_resources')
    op.drop_table('career_resources')
    op.drop_index(op.f('ix_career_resource_categories_category_name'), table_name='career_resource_categories')
    op.drop_table('career_resource_categories')
    op.drop_index(op.f('ix_reviews_course_id'), table_name='reviews')
    op.drop_index(op.f('ix_reviews_user_id'), table_name='reviews')
    op.drop_table('reviews')
    op.drop_index(op.f('ix_degrees_name'), table_name='degrees')
    op.drop_table('degrees')
    op.drop_index(op.f('ix_topics_module_id'), table_name='topics')
    op.drop_index(op.f('ix_topics_title'), table_name='topics')
    op.drop_table('topics')
    op.drop_index(op.f('ix_modules_course_id'), table_name='modules')
    op.drop_index(op.f('ix_modules_title'), table_name='modules')
    op.drop_table('modules')
    op.drop_table('user_courses_association')
    op.drop_index(op.f('ix_courses_name'), table_name='courses')
    op.drop_index(op.f('ix_courses_instructor_id'), table_name='courses')
    op.drop_index(op.f('ix_courses_course_id'), table_name='courses')
    op.drop_table('courses')
    op.drop_index(op.f('ix_instructors_external_id'), table_name='instructors')
    op.drop_table('instructors')
    op.drop_index(op.f('ix_users_role'), table_name='users')
    op.drop_index(op.f('ix_users_username'), table_name='users')
    op.drop_index(op.f('ix_users_email'), table_name='users')
    op.drop_table('users')
    op.drop_table('counters')
