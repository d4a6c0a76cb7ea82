"""create records table

Revision ID: 3f9c2a7d1b04
Revises:
Create Date: 2026-10-19 10:12:41.517302
"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = '3f9c2a7d1b04'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    gender_enum = postgresql.ENUM('male', 'female', name='gender', create_type=False)
    gender_enum.create(op.get_bind(), checkfirst=True)

    op.create_table(
        'records',
        sa.Column('id', sa.UUID(as_uuid=True), primary_key=True),
        sa.Column('username', sa.String(length=50), nullable=False),
        sa.Column('phone_number', sa.String(length=20), nullable=False),
        sa.Column('birth_date', sa.Date(), nullable=False),
        sa.Column('gender', gender_enum, nullable=False),
        sa.Column('car_number', sa.String(length=8), nullable=False),
        sa.Column('car_type', sa.String(length=50), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )

    # --- lookup indexes for uniqueness checks and newest-first listing ---
    op.create_index('uq_records_phone_number', 'records', ['phone_number'], unique=True)
    op.create_index('uq_records_car_number', 'records', ['car_number'], unique=True)
    op.create_index('ix_records_created_at', 'records', [sa.text('created_at DESC')])


def downgrade() -> None:
    op.drop_index('ix_records_created_at', table_name='records')
    op.drop_index('uq_records_car_number', table_name='records')
    op.drop_index('uq_records_phone_number', table_name='records')
    op.drop_table('records')

    postgresql.ENUM(name='gender').drop(op.get_bind(), checkfirst=True)
