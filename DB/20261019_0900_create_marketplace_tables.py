"""create marketplace tables

Revision ID: 7c41d2b9e0a3
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = '7c41d2b9e0a3'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'job_postings',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column('supervisor_id', sa.String(length=128), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('company', sa.String(length=255), nullable=True),
        sa.Column('location_name', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=False, server_default=''),
        sa.Column('wage_type', sa.String(length=20), nullable=False),
        sa.Column('wage_amount', sa.Numeric(12, 2), nullable=False),
        sa.Column('required_date', sa.Date(), nullable=False),
        sa.Column('duration_hours', sa.Integer(), nullable=False),
        sa.Column('laborers_required', sa.Integer(), nullable=False),
        sa.Column('laborers_applied', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('status', sa.String(length=20), nullable=False, server_default='open'),
        sa.Column('is_listed', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('expires_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.CheckConstraint('laborers_required >= 1', name='ck_job_postings_required_positive'),
        sa.CheckConstraint(
            'laborers_applied >= 0 AND laborers_applied <= laborers_required',
            name='ck_job_postings_applied_within_capacity',
        ),
        sa.CheckConstraint('duration_hours >= 1', name='ck_job_postings_duration'),
        sa.CheckConstraint('wage_amount > 0', name='ck_job_postings_wage_positive'),
    )
    op.create_index('ix_job_postings_id', 'job_postings', ['id'])
    op.create_index('ix_job_postings_supervisor_id', 'job_postings', ['supervisor_id'])
    op.create_index('ix_job_postings_required_date', 'job_postings', ['required_date'])
    op.create_index('ix_job_postings_feed', 'job_postings', ['status', 'is_listed'])

    op.create_table(
        'job_applications',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column('job_id', postgresql.UUID(as_uuid=True), sa.ForeignKey('job_postings.id'), nullable=False),
        sa.Column('labor_id', sa.String(length=128), nullable=False),
        sa.Column('supervisor_id', sa.String(length=128), nullable=False),
        sa.Column('status', sa.String(length=20), nullable=False, server_default='confirmed'),
        sa.Column('applied_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.UniqueConstraint('job_id', 'labor_id', name='uq_job_application_job_labor'),
    )
    op.create_index('ix_job_applications_id', 'job_applications', ['id'])
    op.create_index('ix_job_applications_job_id', 'job_applications', ['job_id'])
    op.create_index('ix_job_applications_labor_id', 'job_applications', ['labor_id'])
    op.create_index('ix_job_applications_supervisor_id', 'job_applications', ['supervisor_id'])

    op.create_table(
        'bookings',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column('job_id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('labor_id', sa.String(length=128), nullable=False),
        sa.Column('supervisor_id', sa.String(length=128), nullable=False),
        sa.Column('job_title', sa.String(length=255), nullable=False),
        sa.Column('location_name', sa.String(length=255), nullable=False),
        sa.Column('job_date', sa.Date(), nullable=False),
        sa.Column('duration_hours', sa.Integer(), nullable=False),
        sa.Column('wage_amount', sa.Numeric(12, 2), nullable=False),
        sa.Column('status', sa.String(length=20), nullable=False, server_default='confirmed'),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index('ix_bookings_id', 'bookings', ['id'])
    op.create_index('ix_bookings_job_id', 'bookings', ['job_id'])
    op.create_index('ix_bookings_labor_id', 'bookings', ['labor_id'])
    op.create_index('ix_bookings_supervisor_id', 'bookings', ['supervisor_id'])
    op.create_index('ix_bookings_job_date', 'bookings', ['job_date'])
    op.create_index('ix_bookings_status', 'bookings', ['status'])

    op.create_table(
        'rate_policies',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('min_wage_per_hour', sa.Numeric(12, 2), nullable=False),
        sa.Column('last_updated', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.CheckConstraint('id = 1', name='ck_rate_policies_singleton'),
        sa.CheckConstraint('min_wage_per_hour > 0', name='ck_rate_policies_positive'),
    )

    # Seed the default minimum wage
    op.execute("INSERT INTO rate_policies (id, min_wage_per_hour) VALUES (1, 60)")


def downgrade() -> None:
    op.drop_table('rate_policies')

    op.drop_index('ix_bookings_status', table_name='bookings')
    op.drop_index('ix_bookings_job_date', table_name='bookings')
    op.drop_index('ix_bookings_supervisor_id', table_name='bookings')
    op.drop_index('ix_bookings_labor_id', table_name='bookings')
    op.drop_index('ix_bookings_job_id', table_name='bookings')
    op.drop_index('ix_bookings_id', table_name='bookings')
    op.drop_table('bookings')

    op.drop_index('ix_job_applications_supervisor_id', table_name='job_applications')
    op.drop_index('ix_job_applications_labor_id', table_name='job_applications')
    op.drop_index('ix_job_applications_job_id', table_name='job_applications')
    op.drop_index('ix_job_applications_id', table_name='job_applications')
    op.drop_table('job_applications')

    op.drop_index('ix_job_postings_feed', table_name='job_postings')
    op.drop_index('ix_job_postings_required_date', table_name='job_postings')
    op.drop_index('ix_job_postings_supervisor_id', table_name='job_postings')
    op.drop_index('ix_job_postings_id', table_name='job_postings')
    op.drop_table('job_postings')
