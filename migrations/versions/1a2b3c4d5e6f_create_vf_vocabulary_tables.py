"""create vocabulary tables: units, locations, agents, process specs, batches

Revision ID: 1a2b3c4d5e6f
Revises:
Create Date: 2021-11-11 09:40:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

from valueflows.db.types import TagArray

# revision identifiers, used by Alembic.
revision: str = '1a2b3c4d5e6f'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
    ]


def upgrade() -> None:
    op.create_table(
        'vf_unit',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('label', sa.String(length=256), nullable=False),
        sa.Column('symbol', sa.String(length=64), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_table(
        'vf_spatial_thing',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=256), nullable=False),
        sa.Column('mappable_address', sa.Text(), nullable=True),
        sa.Column('lat', sa.Float(), nullable=True),
        sa.Column('long', sa.Float(), nullable=True),
        sa.Column('alt', sa.Float(), nullable=True),
        sa.Column('note', sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_table(
        'vf_agent',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('type', sa.String(length=3), nullable=False),
        sa.Column('name', sa.String(length=256), nullable=False),
        sa.Column('note', sa.Text(), nullable=True),
        sa.Column('classified_as', TagArray(), nullable=True),
        sa.Column('email', sa.String(length=256), nullable=True),
        sa.Column('primary_location_id', sa.Uuid(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['primary_location_id'], ['vf_spatial_thing.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('email', name='uq_vf_agent_email'),
        sa.CheckConstraint("type in ('per','org')", name='ck_vf_agent_type'),
    )
    op.create_table(
        'vf_process_specification',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.Text(), nullable=False),
        sa.Column('note', sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_table(
        'vf_product_batch',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('batch_number', sa.String(length=256), nullable=False),
        sa.Column('expiry_date', sa.DateTime(timezone=True), nullable=True),
        sa.Column('production_date', sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    # Columns are added by the fill migration
    op.create_table(
        'vf_resource_specification',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )


def downgrade() -> None:
    op.drop_table('vf_resource_specification')
    op.drop_table('vf_product_batch')
    op.drop_table('vf_process_specification')
    op.drop_table('vf_agent')
    op.drop_table('vf_spatial_thing')
    op.drop_table('vf_unit')
