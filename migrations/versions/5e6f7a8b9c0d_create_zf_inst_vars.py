"""create zf_inst_vars and seed instance defaults

Revision ID: 5e6f7a8b9c0d
Revises: 4d5e6f7a8b9c
Create Date: 2022-09-20 11:05:00.000000

"""
import uuid
from datetime import datetime, timezone
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '5e6f7a8b9c0d'
down_revision: Union[str, None] = '4d5e6f7a8b9c'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

_unit = sa.table(
    'vf_unit',
    sa.column('id', sa.Uuid()),
    sa.column('label', sa.String()),
    sa.column('symbol', sa.String()),
    sa.column('created_at', sa.DateTime(timezone=True)),
    sa.column('updated_at', sa.DateTime(timezone=True)),
)
_spec = sa.table(
    'vf_resource_specification',
    sa.column('id', sa.Uuid()),
    sa.column('name', sa.Text()),
    sa.column('default_unit_of_resource_id', sa.Uuid()),
    sa.column('created_at', sa.DateTime(timezone=True)),
    sa.column('updated_at', sa.DateTime(timezone=True)),
)
_inst_vars = sa.table(
    'zf_inst_vars',
    sa.column('id', sa.Integer()),
    sa.column('unit_one_id', sa.Uuid()),
    sa.column('spec_currency_id', sa.Uuid()),
    sa.column('spec_project_design_id', sa.Uuid()),
    sa.column('spec_project_service_id', sa.Uuid()),
    sa.column('spec_project_product_id', sa.Uuid()),
)

_SPECS = (
    ('spec_currency_id', 'currency'),
    ('spec_project_design_id', 'Design'),
    ('spec_project_service_id', 'Service'),
    ('spec_project_product_id', 'Product'),
)


def upgrade() -> None:
    op.create_table(
        'zf_inst_vars',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('unit_one_id', sa.Uuid(), nullable=False),
        sa.Column('spec_currency_id', sa.Uuid(), nullable=False),
        sa.Column('spec_project_design_id', sa.Uuid(), nullable=False),
        sa.Column('spec_project_service_id', sa.Uuid(), nullable=False),
        sa.Column('spec_project_product_id', sa.Uuid(), nullable=False),
        sa.ForeignKeyConstraint(['unit_one_id'], ['vf_unit.id']),
        sa.ForeignKeyConstraint(['spec_currency_id'], ['vf_resource_specification.id']),
        sa.ForeignKeyConstraint(['spec_project_design_id'], ['vf_resource_specification.id']),
        sa.ForeignKeyConstraint(['spec_project_service_id'], ['vf_resource_specification.id']),
        sa.ForeignKeyConstraint(['spec_project_product_id'], ['vf_resource_specification.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.CheckConstraint('id = 1', name='ck_zf_inst_vars_singleton'),
    )

    now = datetime.now(timezone.utc)
    unit_one_id = uuid.uuid4()
    op.bulk_insert(_unit, [{'id': unit_one_id, 'label': 'one', 'symbol': '#', 'created_at': now, 'updated_at': now}])

    row = {'id': 1, 'unit_one_id': unit_one_id}
    specs = []
    for key, name in _SPECS:
        spec_id = uuid.uuid4()
        row[key] = spec_id
        specs.append({
            'id': spec_id,
            'name': name,
            'default_unit_of_resource_id': unit_one_id,
            'created_at': now,
            'updated_at': now,
        })
    op.bulk_insert(_spec, specs)
    op.bulk_insert(_inst_vars, [row])


def downgrade() -> None:
    conn = op.get_bind()
    row = conn.execute(sa.select(_inst_vars)).mappings().first()
    op.drop_table('zf_inst_vars')
    if row is not None:
        spec_ids = [row[key] for key, _ in _SPECS]
        conn.execute(_spec.delete().where(_spec.c.id.in_(spec_ids)))
        conn.execute(_unit.delete().where(_unit.c.id == row['unit_one_id']))
