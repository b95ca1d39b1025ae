"""create exercise groups, exercises, workout entries

Revision ID: 5b1d2e7c9a40
Revises:
Create Date: 2026-10-18 21:12:04.118305

"""
import uuid
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '5b1d2e7c9a40'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

DEFAULT_GROUPS = ["Chest", "Back", "Legs", "Shoulders", "Arms", "Core"]

DEFAULT_EXERCISES = [
    ("Barbell Bench Press", "Chest"),
    ("Incline Dumbbell Press", "Chest"),
    ("Deadlift", "Back"),
    ("Pull-ups", "Back"),
    ("Squat", "Legs"),
    ("Leg Press", "Legs"),
    ("Overhead Press", "Shoulders"),
    ("Lateral Raises", "Shoulders"),
    ("Bicep Curls", "Arms"),
    ("Tricep Dips", "Arms"),
]


def upgrade() -> None:
    # 1) exercise_groups
    groups = op.create_table(
        'exercise_groups',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('name', sa.Text(), nullable=False, unique=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
    )

    # 2) exercises
    exercises = op.create_table(
        'exercises',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('name', sa.Text(), nullable=False, unique=True),
        sa.Column('group_id', sa.Uuid(), sa.ForeignKey('exercise_groups.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
    )

    # 3) workout_entries; effort is generated by the database
    op.create_table(
        'workout_entries',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('exercise_id', sa.Uuid(), sa.ForeignKey('exercises.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('weight_kg', sa.Numeric(5, 2), nullable=False),
        sa.Column('reps', sa.Integer(), nullable=False),
        sa.Column('effort', sa.Numeric(8, 2), sa.Computed('weight_kg * reps', persisted=True)),
        sa.Column('workout_date', sa.Date(), server_default=sa.text('CURRENT_DATE'), nullable=False, index=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
    )

    # 4) default groups and exercises
    group_ids = {name: uuid.uuid4() for name in DEFAULT_GROUPS}
    op.bulk_insert(groups, [{'id': gid, 'name': name} for name, gid in group_ids.items()])
    op.bulk_insert(exercises, [
        {'id': uuid.uuid4(), 'name': name, 'group_id': group_ids[group]}
        for name, group in DEFAULT_EXERCISES
    ])


def downgrade() -> None:
    # drop child tables in reverse order
    op.drop_table('workout_entries')
    op.drop_table('exercises')
    op.drop_table('exercise_groups')
