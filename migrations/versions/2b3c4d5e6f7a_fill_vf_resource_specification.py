"""fill vf_resource_specification with descriptive columns

Revision ID: 2b3c4d5e6f7a
Revises: 1a2b3c4d5e6f
Create Date: 2021-11-11 09:49:59.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

from valueflows.db.types import TagArray

# revision identifiers, used by Alembic.
revision: str = '2b3c4d5e6f7a'
down_revision: Union[str, None] = '1a2b3c4d5e6f'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    with op.batch_alter_table('vf_resource_specification') as batch_op:
        batch_op.add_column(sa.Column('name', sa.Text(), nullable=False))
        batch_op.add_column(sa.Column('note', sa.Text(), nullable=True))
        batch_op.add_column(sa.Column('resource_classified_as', TagArray(), nullable=True))
        batch_op.add_column(sa.Column('default_unit_of_resource_id', sa.Uuid(), nullable=True))
        batch_op.add_column(sa.Column('default_unit_of_effort_id', sa.Uuid(), nullable=True))
        batch_op.add_column(sa.Column('created_at', sa.DateTime(timezone=True), nullable=True))
        batch_op.add_column(sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True))
        batch_op.create_foreign_key(
            'fk_vf_resource_specification_default_unit_of_resource_id',
            'vf_unit', ['default_unit_of_resource_id'], ['id'],
        )
        batch_op.create_foreign_key(
            'fk_vf_resource_specification_default_unit_of_effort_id',
            'vf_unit', ['default_unit_of_effort_id'], ['id'],
        )


def downgrade() -> None:
    with op.batch_alter_table('vf_resource_specification') as batch_op:
        batch_op.drop_constraint('fk_vf_resource_specification_default_unit_of_effort_id', type_='foreignkey')
        batch_op.drop_constraint('fk_vf_resource_specification_default_unit_of_resource_id', type_='foreignkey')
        batch_op.drop_column('updated_at')
        batch_op.drop_column('created_at')
        batch_op.drop_column('default_unit_of_effort_id')
        batch_op.drop_column('default_unit_of_resource_id')
        batch_op.drop_column('resource_classified_as')
        batch_op.drop_column('note')
        batch_op.drop_column('name')
