"""Create plant care tables

Revision ID: 001
Revises:
Create Date: 2026-10-19 10:00:00.000000

"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create plant care tables"""

    # 1. Create users table
    op.create_table('users',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('username', sa.String(50), nullable=False),
        sa.Column('password_hash', sa.String(255), nullable=False),
        sa.Column('level', sa.Integer(), server_default='1', nullable=False),
        sa.Column('points', sa.Integer(), server_default='0', nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),

        sa.PrimaryKeyConstraint('id', name='pk_users'),
        sa.CheckConstraint('level >= 1', name='ck_users_level_positive'),
        sa.CheckConstraint('points >= 0', name='ck_users_points_non_negative'),
    )

    op.create_index('ix_users_username', 'users', ['username'], unique=True)

    # 2. Create plants table
    op.create_table('plants',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('species', sa.String(100), nullable=True),
        sa.Column('image_url', sa.Text(), nullable=True),
        sa.Column('health_score', sa.Integer(), server_default='100', nullable=False),
        sa.Column('water_level', sa.Integer(), server_default='100', nullable=False),
        sa.Column('light_level', sa.Integer(), server_default='100', nullable=False),
        sa.Column('nutrient_level', sa.Integer(), server_default='100', nullable=False),
        sa.Column('pest_risk', sa.Integer(), server_default='0', nullable=False),
        sa.Column('last_watered', sa.DateTime(timezone=True), nullable=True),
        sa.Column('last_fertilized', sa.DateTime(timezone=True), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),

        sa.PrimaryKeyConstraint('id', name='pk_plants'),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], name='fk_plants_user_id_users', ondelete='CASCADE'),
        sa.CheckConstraint('health_score BETWEEN 0 AND 100', name='ck_plants_health_score_range'),
        sa.CheckConstraint('water_level BETWEEN 0 AND 100', name='ck_plants_water_level_range'),
        sa.CheckConstraint('light_level BETWEEN 0 AND 100', name='ck_plants_light_level_range'),
        sa.CheckConstraint('nutrient_level BETWEEN 0 AND 100', name='ck_plants_nutrient_level_range'),
        sa.CheckConstraint('pest_risk BETWEEN 0 AND 100', name='ck_plants_pest_risk_range'),
    )

    op.create_index('ix_plants_user_id', 'plants', ['user_id'])

    # 3. Create tasks table
    op.create_table('tasks',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('plant_id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(200), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('type', sa.String(50), nullable=False),
        sa.Column('priority', sa.String(20), server_default='medium', nullable=False),
        sa.Column('completed', sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column('due_date', sa.DateTime(timezone=True), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),

        sa.PrimaryKeyConstraint('id', name='pk_tasks'),
        sa.ForeignKeyConstraint(['plant_id'], ['plants.id'], name='fk_tasks_plant_id_plants', ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], name='fk_tasks_user_id_users', ondelete='CASCADE'),
        sa.CheckConstraint("priority IN ('urgent', 'high', 'medium', 'low')", name='ck_tasks_priority'),
    )

    op.create_index('ix_tasks_plant_id', 'tasks', ['plant_id'])
    op.create_index('ix_tasks_user_id', 'tasks', ['user_id'])
    op.create_index('ix_tasks_user_id_type_completed', 'tasks', ['user_id', 'type', 'completed'])

    # 4. Create badges table
    op.create_table('badges',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('icon', sa.String(50), nullable=False),
        sa.Column('requirements', sa.JSON(), nullable=False),
        sa.Column('points_bonus', sa.Integer(), server_default='0', nullable=False),

        sa.PrimaryKeyConstraint('id', name='pk_badges'),
        sa.UniqueConstraint('name', name='uq_badges_name'),
        sa.CheckConstraint('points_bonus >= 0', name='ck_badges_points_bonus_non_negative'),
    )

    # 5. Create user_badges table
    op.create_table('user_badges',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('badge_id', sa.Integer(), nullable=False),
        sa.Column('earned_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),

        sa.PrimaryKeyConstraint('id', name='pk_user_badges'),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], name='fk_user_badges_user_id_users', ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['badge_id'], ['badges.id'], name='fk_user_badges_badge_id_badges', ondelete='CASCADE'),
        sa.UniqueConstraint('user_id', 'badge_id', name='uq_user_badges_user_id_badge_id'),
    )

    op.create_index('ix_user_badges_user_id', 'user_badges', ['user_id'])

    # 6. Create notifications table
    op.create_table('notifications',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(200), nullable=False),
        sa.Column('message', sa.Text(), nullable=False),
        sa.Column('type', sa.String(20), nullable=False),
        sa.Column('read', sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column('related_id', sa.Integer(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),

        sa.PrimaryKeyConstraint('id', name='pk_notifications'),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], name='fk_notifications_user_id_users', ondelete='CASCADE'),
        sa.CheckConstraint("type IN ('task', 'issue', 'badge', 'tip')", name='ck_notifications_type'),
    )

    op.create_index('ix_notifications_user_id', 'notifications', ['user_id'])

    # 7. Create plant_analyses table (no FK on plant_id, history outlives the plant)
    op.create_table('plant_analyses',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('plant_id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('health_score', sa.Integer(), nullable=False),
        sa.Column('water_level', sa.Integer(), nullable=False),
        sa.Column('light_level', sa.Integer(), nullable=False),
        sa.Column('nutrient_level', sa.Integer(), nullable=False),
        sa.Column('pest_risk', sa.Integer(), nullable=False),
        sa.Column('issues', sa.JSON(), nullable=False),
        sa.Column('recommendations', sa.JSON(), nullable=False),
        sa.Column('image_url', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),

        sa.PrimaryKeyConstraint('id', name='pk_plant_analyses'),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], name='fk_plant_analyses_user_id_users', ondelete='CASCADE'),
    )

    op.create_index('ix_plant_analyses_user_id', 'plant_analyses', ['user_id'])
    op.create_index('ix_plant_analyses_plant_id_created_at', 'plant_analyses', ['plant_id', 'created_at'])


def downgrade() -> None:
    """Drop plant care tables"""
    op.drop_table('plant_analyses')
    op.drop_table('notifications')
    op.drop_table('user_badges')
    op.drop_table('badges')
    op.drop_table('tasks')
    op.drop_table('plants')
    op.drop_table('users')
