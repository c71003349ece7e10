"""Initial schema

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # Create ENUM types
    op.execute("CREATE TYPE loan_decision_status AS ENUM ('APPROVED', 'MODIFIED_APPROVAL', 'REJECTED')")
    op.execute("CREATE TYPE credit_tier AS ENUM ('EXCELLENT', 'PRIME', 'STANDARD', 'HIGH_RISK', 'SUBPRIME')")

    # Create loan_analyses table
    op.create_table(
        'loan_analyses',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True, nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('monthly_income', sa.Numeric(precision=15, scale=2), nullable=False),
        sa.Column('existing_emis', sa.Numeric(precision=15, scale=2), nullable=False),
        sa.Column('credit_score', sa.Integer(), nullable=False),
        sa.Column('age', sa.Integer(), nullable=False),
        sa.Column('loan_amount_requested', sa.Numeric(precision=15, scale=2), nullable=False),
        sa.Column('status', postgresql.ENUM(name='loan_decision_status', create_type=False), nullable=False),
        sa.Column('credit_tier', postgresql.ENUM(name='credit_tier', create_type=False), nullable=True),
        sa.Column('reason', sa.Text(), nullable=False),
        sa.Column('details', postgresql.JSONB(astext_type=sa.Text()), nullable=False),
    )
    op.create_index('ix_loan_analyses_status', 'loan_analyses', ['status'])
    op.create_index('ix_loan_analyses_created_at', 'loan_analyses', ['created_at'])


def downgrade() -> None:
    op.drop_index('ix_loan_analyses_created_at', table_name='loan_analyses')
    op.drop_index('ix_loan_analyses_status', table_name='loan_analyses')
    op.drop_table('loan_analyses')

    # Drop ENUM types
    op.execute('DROP TYPE credit_tier')
    op.execute('DROP TYPE loan_decision_status')
