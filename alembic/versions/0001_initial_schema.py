"""create education tables

Revision ID: 0001_initial_schema
Revises: 
Create Date: 2026-10-19 00:00:00

"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '0001_initial_schema'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _id() -> sa.Column:
    return sa.Column('id', sa.Integer, primary_key=True, autoincrement=True)


def upgrade() -> None:
    op.create_table(
        'users',
        _id(),
        sa.Column('username', sa.Text, nullable=False),
        sa.Column('password', sa.Text, nullable=False),
        sa.Column('email', sa.Text, nullable=False),
        sa.Column('full_name', sa.Text, nullable=False),
        sa.Column('role', sa.Text, nullable=False, server_default='user'),
        sa.Column('institution_id', sa.Integer),
        sa.UniqueConstraint('username', name='uq_users_username'),
    )
    op.create_index('ix_users_institution_id', 'users', ['institution_id'])

    op.create_table(
        'institutions',
        _id(),
        sa.Column('name', sa.Text, nullable=False),
        sa.Column('address', sa.Text, nullable=False),
        sa.Column('phone', sa.Text, nullable=False),
        sa.Column('email', sa.Text, nullable=False),
        sa.Column('type', sa.Text, nullable=False, server_default='university'),
    )

    op.create_table(
        'students',
        _id(),
        sa.Column('full_name', sa.Text, nullable=False),
        sa.Column('enrollment_number', sa.Text, nullable=False),
        sa.Column('email', sa.Text, nullable=False),
        sa.Column('department', sa.Text, nullable=False),
        sa.Column('semester', sa.Integer, nullable=False),
        sa.Column('institution_id', sa.Integer, nullable=False),
        sa.UniqueConstraint('enrollment_number', name='uq_students_enrollment_number'),
    )
    op.create_index('ix_students_institution_id', 'students', ['institution_id'])

    op.create_table(
        'faculty',
        _id(),
        sa.Column('full_name', sa.Text, nullable=False),
        sa.Column('employee_id', sa.Text, nullable=False),
        sa.Column('email', sa.Text, nullable=False),
        sa.Column('department', sa.Text, nullable=False),
        sa.Column('designation', sa.Text, nullable=False),
        sa.Column('institution_id', sa.Integer, nullable=False),
        sa.UniqueConstraint('employee_id', name='uq_faculty_employee_id'),
    )
    op.create_index('ix_faculty_institution_id', 'faculty', ['institution_id'])

    op.create_table(
        'classes',
        _id(),
        sa.Column('name', sa.Text, nullable=False),
        sa.Column('subject', sa.Text, nullable=False),
        sa.Column('department', sa.Text, nullable=False),
        sa.Column('semester', sa.Integer, nullable=False),
        sa.Column('institution_id', sa.Integer, nullable=False),
    )
    op.create_index('ix_classes_institution_id', 'classes', ['institution_id'])

    op.create_table(
        'attendance',
        _id(),
        sa.Column('student_id', sa.Integer, nullable=False),
        sa.Column('class_id', sa.Integer, nullable=False),
        sa.Column('date', sa.Text, nullable=False),
        sa.Column('status', sa.Text, nullable=False, server_default='present'),
        sa.Column('marked_by', sa.Integer),
    )
    op.create_index('ix_attendance_student_id', 'attendance', ['student_id'])
    op.create_index('ix_attendance_class_id', 'attendance', ['class_id'])

    op.create_table(
        'timetable',
        _id(),
        sa.Column('class_id', sa.Integer, nullable=False),
        sa.Column('faculty_id', sa.Integer, nullable=False),
        sa.Column('subject', sa.Text, nullable=False),
        sa.Column('day_of_week', sa.Text, nullable=False),
        sa.Column('start_time', sa.Text, nullable=False),
        sa.Column('end_time', sa.Text, nullable=False),
        sa.Column('room', sa.Text, nullable=False),
        sa.Column('institution_id', sa.Integer, nullable=False),
    )
    op.create_index('ix_timetable_class_id', 'timetable', ['class_id'])
    op.create_index('ix_timetable_faculty_id', 'timetable', ['faculty_id'])
    op.create_index('ix_timetable_institution_id', 'timetable', ['institution_id'])


def downgrade() -> None:
    for table in ('timetable', 'attendance', 'classes', 'faculty', 'students', 'institutions', 'users'):
        op.drop_table(table)
