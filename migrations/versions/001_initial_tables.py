"""Create user management and school tables

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

ID_LENGTH = 64


def upgrade() -> None:
    """Create user management and school tables"""

    # 1. Create users table
    op.create_table('users',
        sa.Column('id', sa.String(ID_LENGTH), nullable=False),
        sa.Column('first_name', sa.String(100), nullable=False),
        sa.Column('last_name', sa.String(100), nullable=False),
        sa.Column('user_name', sa.String(50), nullable=False),
        sa.Column('email_address', sa.String(255), nullable=False),
        sa.Column('email_address_normalized', sa.String(255), nullable=False,
                  comment='Upper-case email used for case-insensitive lookup'),
        sa.Column('password_hash', sa.String(512), nullable=False),
        sa.Column('password_salt', sa.String(255), nullable=False),
        sa.Column('avatar_url', sa.String(2048), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),

        sa.PrimaryKeyConstraint('id', name='pk_users'),
    )

    op.create_index('ix_users_user_name', 'users', ['user_name'], unique=True)
    op.create_index('ix_users_email_address_normalized', 'users', ['email_address_normalized'], unique=True)

    # 2. Create user_sessions table
    op.create_table('user_sessions',
        sa.Column('id', sa.String(ID_LENGTH), nullable=False),
        sa.Column('user_id', sa.String(ID_LENGTH), nullable=False),
        sa.Column('token', sa.String(512), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('expires_at', sa.DateTime(timezone=True), nullable=False),

        sa.PrimaryKeyConstraint('id', name='pk_user_sessions'),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE',
                                name='fk_user_sessions_user_id_users'),
    )

    op.create_index('ix_user_sessions_user_id', 'user_sessions', ['user_id'])
    op.create_index('ix_user_sessions_token', 'user_sessions', ['token'])

    # 3. Create hydration_records table
    op.create_table('hydration_records',
        sa.Column('id', sa.String(ID_LENGTH), nullable=False),
        sa.Column('user_id', sa.String(ID_LENGTH), nullable=False),
        sa.Column('date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('amount_ml', sa.Integer(), nullable=False),

        sa.PrimaryKeyConstraint('id', name='pk_hydration_records'),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE',
                                name='fk_hydration_records_user_id_users'),
        sa.CheckConstraint('amount_ml > 0 AND amount_ml < 10000',
                           name='ck_hydration_records_amount_ml_range'),
    )

    op.create_index('ix_hydration_records_user_id', 'hydration_records', ['user_id'])
    op.create_index('ix_hydration_records_date', 'hydration_records', ['date'])

    # 4. Create teachers table
    op.create_table('teachers',
        sa.Column('id', sa.String(ID_LENGTH), nullable=False),
        sa.Column('first_name', sa.String(100), nullable=False),
        sa.Column('last_name', sa.String(100), nullable=False),

        sa.PrimaryKeyConstraint('id', name='pk_teachers'),
    )

    # 5. Create school_years table
    op.create_table('school_years',
        sa.Column('id', sa.String(ID_LENGTH), nullable=False),
        sa.Column('start_year', sa.Integer(), nullable=False),
        sa.Column('end_year', sa.Integer(), nullable=False),

        sa.PrimaryKeyConstraint('id', name='pk_school_years'),
    )

    # 6. Create subjects table
    op.create_table('subjects',
        sa.Column('id', sa.String(ID_LENGTH), nullable=False),
        sa.Column('name', sa.String(200), nullable=False),
        sa.Column('teacher_id', sa.String(ID_LENGTH), nullable=False),
        sa.Column('school_year_id', sa.String(ID_LENGTH), nullable=False),

        sa.PrimaryKeyConstraint('id', name='pk_subjects'),
        sa.ForeignKeyConstraint(['teacher_id'], ['teachers.id'],
                                name='fk_subjects_teacher_id_teachers'),
        sa.ForeignKeyConstraint(['school_year_id'], ['school_years.id'],
                                name='fk_subjects_school_year_id_school_years'),
    )

    op.create_index('ix_subjects_teacher_id', 'subjects', ['teacher_id'])
    op.create_index('ix_subjects_school_year_id', 'subjects', ['school_year_id'])

    # 7. Create marks table
    op.create_table('marks',
        sa.Column('id', sa.String(ID_LENGTH), nullable=False),
        sa.Column('value', sa.Integer(), nullable=False),
        sa.Column('weight', sa.Integer(), nullable=False),
        sa.Column('subject_id', sa.String(ID_LENGTH), nullable=False),

        sa.PrimaryKeyConstraint('id', name='pk_marks'),
        sa.ForeignKeyConstraint(['subject_id'], ['subjects.id'],
                                name='fk_marks_subject_id_subjects'),
    )

    op.create_index('ix_marks_subject_id', 'marks', ['subject_id'])


def downgrade() -> None:
    """Drop user management and school tables"""
    op.drop_table('marks')
    op.drop_table('subjects')
    op.drop_table('school_years')
    op.drop_table('teachers')
    op.drop_table('hydration_records')
    op.drop_table('user_sessions')
    op.drop_table('users')
