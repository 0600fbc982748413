"""create vf_economic_resource and zf_file

Revision ID: 3c4d5e6f7a8b
Revises: 2b3c4d5e6f7a
Create Date: 2021-11-12 10:15:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

from valueflows.db.types import TagArray

# revision identifiers, used by Alembic.
revision: str = '3c4d5e6f7a8b'
down_revision: Union[str, None] = '2b3c4d5e6f7a'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'vf_economic_resource',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.Text(), nullable=False),
        sa.Column('note', sa.Text(), nullable=True),
        sa.Column('tracking_identifier', sa.Text(), nullable=True),
        sa.Column('classified_as', TagArray(), nullable=True),
        sa.Column('conforms_to_id', sa.Uuid(), nullable=False),
        sa.Column('accounting_quantity_has_numerical_value', sa.Numeric(38, 16), nullable=True),
        sa.Column('accounting_quantity_has_unit_id', sa.Uuid(), nullable=True),
        sa.Column('onhand_quantity_has_numerical_value', sa.Numeric(38, 16), nullable=True),
        sa.Column('onhand_quantity_has_unit_id', sa.Uuid(), nullable=True),
        sa.Column('primary_accountable_id', sa.Uuid(), nullable=True),
        sa.Column('custodian_id', sa.Uuid(), nullable=True),
        sa.Column('stage_id', sa.Uuid(), nullable=True),
        sa.Column('state_id', sa.String(length=32), nullable=True),
        sa.Column('current_location_id', sa.Uuid(), nullable=True),
        sa.Column('lot_id', sa.Uuid(), nullable=True),
        sa.Column('contained_in_id', sa.Uuid(), nullable=True),
        sa.Column('unit_of_effort_id', sa.Uuid(), nullable=True),
        sa.Column('repo', sa.String(length=512), nullable=True),
        sa.Column('version', sa.String(length=256), nullable=True),
        sa.Column('licensor', sa.String(length=256), nullable=True),
        sa.Column('license', sa.String(length=256), nullable=True),
        sa.Column('metadata', sa.JSON(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(['conforms_to_id'], ['vf_resource_specification.id']),
        sa.ForeignKeyConstraint(['accounting_quantity_has_unit_id'], ['vf_unit.id']),
        sa.ForeignKeyConstraint(['onhand_quantity_has_unit_id'], ['vf_unit.id']),
        sa.ForeignKeyConstraint(['primary_accountable_id'], ['vf_agent.id']),
        sa.ForeignKeyConstraint(['custodian_id'], ['vf_agent.id']),
        sa.ForeignKeyConstraint(['stage_id'], ['vf_process_specification.id']),
        sa.ForeignKeyConstraint(['current_location_id'], ['vf_spatial_thing.id']),
        sa.ForeignKeyConstraint(['lot_id'], ['vf_product_batch.id']),
        sa.ForeignKeyConstraint(['contained_in_id'], ['vf_economic_resource.id'], ondelete='SET NULL'),
        sa.ForeignKeyConstraint(['unit_of_effort_id'], ['vf_unit.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('idx_vf_economic_resource_primary_accountable_id', 'vf_economic_resource', ['primary_accountable_id'], unique=False)
    op.create_index('idx_vf_economic_resource_custodian_id', 'vf_economic_resource', ['custodian_id'], unique=False)
    op.create_index('idx_vf_economic_resource_conforms_to_id', 'vf_economic_resource', ['conforms_to_id'], unique=False)

    op.create_table(
        'zf_file',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('hash', sa.String(length=128), nullable=False),
        sa.Column('name', sa.String(length=256), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('mime_type', sa.String(length=128), nullable=False),
        sa.Column('extension', sa.String(length=16), nullable=False),
        sa.Column('size', sa.Integer(), nullable=False),
        sa.Column('signature', sa.Text(), nullable=True),
        sa.Column('width', sa.Integer(), nullable=True),
        sa.Column('height', sa.Integer(), nullable=True),
        sa.Column('url', sa.String(length=512), nullable=True),
        sa.Column('economic_resource_id', sa.Uuid(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(['economic_resource_id'], ['vf_economic_resource.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('idx_zf_file_economic_resource_id', 'zf_file', ['economic_resource_id'], unique=False)


def downgrade() -> None:
    op.drop_index('idx_zf_file_economic_resource_id', table_name='zf_file')
    op.drop_table('zf_file')
    op.drop_index('idx_vf_economic_resource_conforms_to_id', table_name='vf_economic_resource')
    op.drop_index('idx_vf_economic_resource_custodian_id', table_name='vf_economic_resource')
    op.drop_index('idx_vf_economic_resource_primary_accountable_id', table_name='vf_economic_resource')
    op.drop_table('vf_economic_resource')
