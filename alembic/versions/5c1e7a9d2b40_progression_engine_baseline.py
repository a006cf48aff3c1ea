"""progression_engine_baseline

Revision ID: 5c1e7a9d2b40
Revises:
Create Date: 2026-10-17 09:12:44.381220

Creates the sessions, scoring and progression tables. Only creates tables that
do not already exist.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy import inspect


# revision identifiers, used by Alembic.
revision: str = '5c1e7a9d2b40'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def table_exists(table_name: str) -> bool:
    """Check if a table exists in the database."""
    bind = op.get_bind()
    inspector = inspect(bind)
    return table_name in inspector.get_table_names()


def upgrade() -> None:
    if not table_exists('users'):
        op.create_table('users',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('full_name', sa.String(), nullable=False),
            sa.Column('email', sa.String(), nullable=True),
            sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index(op.f('ix_users_id'), 'users', ['id'], unique=False)
        op.create_index(op.f('ix_users_email'), 'users', ['email'], unique=True)

    if not table_exists('interview_sessions'):
        op.create_table('interview_sessions',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('user_id', sa.Integer(), nullable=False),
            sa.Column('role', sa.String(), nullable=False),
            sa.Column('category', sa.String(), nullable=False),
            sa.Column('difficulty', sa.String(), nullable=False),
            sa.Column('mode', sa.String(), nullable=False),
            sa.Column('company_preset', sa.String(), nullable=True),
            sa.Column('average_score', sa.Float(), nullable=False),
            sa.Column('started_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=False),
            sa.Column('completed_at', sa.DateTime(timezone=True), nullable=True),
            sa.ForeignKeyConstraint(['user_id'], ['users.id'], ),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index(op.f('ix_interview_sessions_id'), 'interview_sessions', ['id'], unique=False)
        op.create_index(op.f('ix_interview_sessions_user_id'), 'interview_sessions', ['user_id'], unique=False)
        op.create_index('idx_session_user_started', 'interview_sessions', ['user_id', 'started_at'], unique=False)

    if not table_exists('questions'):
        op.create_table('questions',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('session_id', sa.Integer(), nullable=False),
            sa.Column('text', sa.Text(), nullable=False),
            sa.Column('difficulty', sa.String(), nullable=False),
            sa.Column('category', sa.String(), nullable=False),
            sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
            sa.ForeignKeyConstraint(['session_id'], ['interview_sessions.id'], ),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index(op.f('ix_questions_id'), 'questions', ['id'], unique=False)
        op.create_index(op.f('ix_questions_session_id'), 'questions', ['session_id'], unique=False)

    if not table_exists('responses'):
        op.create_table('responses',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('session_id', sa.Integer(), nullable=False),
            sa.Column('question_id', sa.Integer(), nullable=False),
            sa.Column('answer_text', sa.Text(), nullable=False),
            sa.Column('technical_score', sa.Float(), nullable=False),
            sa.Column('communication_score', sa.Float(), nullable=False),
            sa.Column('confidence_score', sa.Float(), nullable=False),
            sa.Column('logic_score', sa.Float(), nullable=False),
            sa.Column('depth_score', sa.Float(), nullable=False),
            sa.Column('difficulty_recommendation', sa.String(), nullable=False),
            sa.Column('weak_topics', sa.JSON(), nullable=False),
            sa.Column('strengths', sa.JSON(), nullable=False),
            sa.Column('feedback', sa.Text(), nullable=True),
            sa.Column('ideal_answer', sa.Text(), nullable=True),
            sa.Column('improvement_tip', sa.Text(), nullable=True),
            sa.Column('llm_output_valid', sa.Boolean(), nullable=False),
            sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
            sa.ForeignKeyConstraint(['question_id'], ['questions.id'], ),
            sa.ForeignKeyConstraint(['session_id'], ['interview_sessions.id'], ),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index(op.f('ix_responses_id'), 'responses', ['id'], unique=False)
        op.create_index(op.f('ix_responses_session_id'), 'responses', ['session_id'], unique=False)
        op.create_index(op.f('ix_responses_question_id'), 'responses', ['question_id'], unique=False)

    if not table_exists('score_breakdowns'):
        op.create_table('score_breakdowns',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('session_id', sa.Integer(), nullable=False),
            sa.Column('overall_score', sa.Float(), nullable=False),
            sa.Column('technical_average', sa.Float(), nullable=False),
            sa.Column('communication_average', sa.Float(), nullable=False),
            sa.Column('confidence_average', sa.Float(), nullable=False),
            sa.Column('logic_average', sa.Float(), nullable=False),
            sa.Column('depth_average', sa.Float(), nullable=False),
            sa.Column('response_count', sa.Integer(), nullable=False),
            sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=False),
            sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=False),
            sa.ForeignKeyConstraint(['session_id'], ['interview_sessions.id'], ),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index(op.f('ix_score_breakdowns_id'), 'score_breakdowns', ['id'], unique=False)
        op.create_index(op.f('ix_score_breakdowns_session_id'), 'score_breakdowns', ['session_id'], unique=True)

    if not table_exists('weak_skill_memory'):
        op.create_table('weak_skill_memory',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('user_id', sa.Integer(), nullable=False),
            sa.Column('skill_name', sa.String(), nullable=False),
            sa.Column('weakness_count', sa.Integer(), nullable=False),
            sa.Column('last_occurred_at', sa.DateTime(timezone=True), nullable=False),
            sa.ForeignKeyConstraint(['user_id'], ['users.id'], ),
            sa.PrimaryKeyConstraint('id'),
            sa.UniqueConstraint('user_id', 'skill_name', name='uq_user_skill')
        )
        op.create_index(op.f('ix_weak_skill_memory_id'), 'weak_skill_memory', ['id'], unique=False)
        op.create_index(op.f('ix_weak_skill_memory_user_id'), 'weak_skill_memory', ['user_id'], unique=False)
        op.create_index('idx_user_weakness', 'weak_skill_memory', ['user_id', 'weakness_count'], unique=False)

    if not table_exists('readiness_index'):
        op.create_table('readiness_index',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('user_id', sa.Integer(), nullable=False),
            sa.Column('readiness_score', sa.Float(), nullable=False),
            sa.Column('calculated_at', sa.DateTime(timezone=True), nullable=False),
            sa.ForeignKeyConstraint(['user_id'], ['users.id'], ),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index(op.f('ix_readiness_index_id'), 'readiness_index', ['id'], unique=False)
        op.create_index(op.f('ix_readiness_index_user_id'), 'readiness_index', ['user_id'], unique=True)

    if not table_exists('improvement_plans'):
        op.create_table('improvement_plans',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('user_id', sa.Integer(), nullable=False),
            sa.Column('plan', sa.JSON(), nullable=False),
            sa.Column('generated_at', sa.DateTime(timezone=True), nullable=False),
            sa.ForeignKeyConstraint(['user_id'], ['users.id'], ),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index(op.f('ix_improvement_plans_id'), 'improvement_plans', ['id'], unique=False)
        op.create_index(op.f('ix_improvement_plans_user_id'), 'improvement_plans', ['user_id'], unique=False)
        op.create_index(op.f('ix_improvement_plans_generated_at'), 'improvement_plans', ['generated_at'], unique=False)
        op.create_index('idx_plan_user_generated', 'improvement_plans', ['user_id', 'generated_at'], unique=False)

    if not table_exists('badges'):
        op.create_table('badges',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('user_id', sa.Integer(), nullable=False),
            sa.Column('badge_name', sa.String(), nullable=False),
            sa.Column('awarded_at', sa.DateTime(timezone=True), nullable=False),
            sa.ForeignKeyConstraint(['user_id'], ['users.id'], ),
            sa.PrimaryKeyConstraint('id'),
            sa.UniqueConstraint('user_id', 'badge_name', name='uq_user_badge')
        )
        op.create_index(op.f('ix_badges_id'), 'badges', ['id'], unique=False)
        op.create_index(op.f('ix_badges_user_id'), 'badges', ['user_id'], unique=False)

    if not table_exists('question_bank'):
        op.create_table('question_bank',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('text', sa.Text(), nullable=False),
            sa.Column('difficulty', sa.String(), nullable=False),
            sa.Column('category', sa.String(), nullable=False),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index(op.f('ix_question_bank_id'), 'question_bank', ['id'], unique=False)
        op.create_index(op.f('ix_question_bank_difficulty'), 'question_bank', ['difficulty'], unique=False)
        op.create_index(op.f('ix_question_bank_category'), 'question_bank', ['category'], unique=False)
        op.create_index('idx_bank_difficulty_category', 'question_bank', ['difficulty', 'category'], unique=False)

    if not table_exists('ai_runs'):
        op.create_table('ai_runs',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('user_id', sa.Integer(), nullable=False),
            sa.Column('session_id', sa.Integer(), nullable=False),
            sa.Column('provider', sa.String(), nullable=False),
            sa.Column('model', sa.String(), nullable=False),
            sa.Column('tokens_in', sa.Integer(), nullable=True),
            sa.Column('tokens_out', sa.Integer(), nullable=True),
            sa.Column('status', sa.String(), nullable=False),
            sa.Column('llm_output_valid', sa.Boolean(), nullable=False),
            sa.Column('error_message', sa.Text(), nullable=True),
            sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=False),
            sa.ForeignKeyConstraint(['session_id'], ['interview_sessions.id'], ),
            sa.ForeignKeyConstraint(['user_id'], ['users.id'], ),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index(op.f('ix_ai_runs_id'), 'ai_runs', ['id'], unique=False)
        op.create_index(op.f('ix_ai_runs_user_id'), 'ai_runs', ['user_id'], unique=False)
        op.create_index(op.f('ix_ai_runs_session_id'), 'ai_runs', ['session_id'], unique=False)
        op.create_index('idx_run_user_created', 'ai_runs', ['user_id', 'created_at'], unique=False)


def downgrade() -> None:
    for table_name in (
        'ai_runs',
        'question_bank',
        'badges',
        'improvement_plans',
        'readiness_index',
        'weak_skill_memory',
        'score_breakdowns',
        'responses',
        'questions',
        'interview_sessions',
        'users',
    ):
        if table_exists(table_name):
            op.drop_table(table_name)
