"""Create students, performances and study_goals tables

Revision ID: 3a7c1e9d4b20
Revises:
Create Date: 2026-10-19 10:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3a7c1e9d4b20'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

METRIC_COLUMNS = ('attendance', 'assignmentScore', 'internalMarks', 'projectMarks', 'finalExamMarks')


def upgrade() -> None:
    """Create the three core tables."""
    op.create_table(
        'students',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('password_hash', sa.String(), nullable=False),
        sa.Column('rollNumber', sa.String(), nullable=False),
        sa.Column('department', sa.String(), nullable=False),
        sa.Column('semester', sa.Integer(), nullable=False),
        sa.Column('createdAt', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index('ix_students_id', 'students', ['id'])
    op.create_index('ix_students_email', 'students', ['email'], unique=True)
    op.create_index('ix_students_rollNumber', 'students', ['rollNumber'], unique=True)

    op.create_table(
        'performances',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('studentId', sa.String(), sa.ForeignKey('students.id'), nullable=False),
        sa.Column('subject', sa.String(), nullable=False),
        *[sa.Column(column, sa.Float(), nullable=False) for column in METRIC_COLUMNS],
        sa.Column('predictedGrade', sa.String(length=1), nullable=True),
        sa.Column('createdAt', sa.DateTime(timezone=True), server_default=sa.func.now()),
        *[
            sa.CheckConstraint(f'"{column}" >= 0 AND "{column}" <= 100', name=f'ck_performances_{column}_range')
            for column in METRIC_COLUMNS
        ],
    )
    op.create_index('ix_performances_id', 'performances', ['id'])
    op.create_index('ix_performances_studentId', 'performances', ['studentId'])
    op.create_index('ix_performances_subject', 'performances', ['subject'])
    op.create_index('ix_performances_createdAt', 'performances', ['createdAt'])

    op.create_table(
        'study_goals',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('studentId', sa.String(), sa.ForeignKey('students.id'), nullable=False),
        sa.Column('subject', sa.String(), nullable=False),
        sa.Column('topic', sa.String(), nullable=False),
        sa.Column('deadline', sa.DateTime(timezone=True), nullable=False),
        sa.Column('priority', sa.String(), nullable=False),
        sa.Column('status', sa.String(), nullable=False),
        sa.Column('createdAt', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index('ix_study_goals_id', 'study_goals', ['id'])
    op.create_index('ix_study_goals_studentId', 'study_goals', ['studentId'])
    op.create_index('ix_study_goals_deadline', 'study_goals', ['deadline'])


def downgrade() -> None:
    """Drop the three core tables."""
    op.drop_table('study_goals')
    op.drop_table('performances')
    op.drop_table('students')
