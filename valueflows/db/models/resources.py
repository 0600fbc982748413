import uuid
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from sqlalchemy import Column, String, Text, DateTime, Numeric, ForeignKey, Index, JSON, Uuid
from sqlalchemy.orm import relationship

from .base import Base, now_utc
from ..actions import Action, get_action
from ..types import TagArray


@dataclass(frozen=True)
class Measure:
    """A numeric value paired with its unit."""
    has_numerical_value: Decimal
    has_unit: Optional[object]


class EconomicResource(Base):
    __tablename__ = 'vf_economic_resource'
    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(Text, nullable=False)
    note = Column(Text, nullable=True)
    tracking_identifier = Column(Text, nullable=True)
    classified_as = Column(TagArray(), nullable=True)

    conforms_to_id = Column(Uuid(as_uuid=True), ForeignKey('vf_resource_specification.id'), nullable=False)
    accounting_quantity_has_numerical_value = Column(Numeric(38, 16), nullable=True)
    accounting_quantity_has_unit_id = Column(Uuid(as_uuid=True), ForeignKey('vf_unit.id'), nullable=True)
    onhand_quantity_has_numerical_value = Column(Numeric(38, 16), nullable=True)
    onhand_quantity_has_unit_id = Column(Uuid(as_uuid=True), ForeignKey('vf_unit.id'), nullable=True)

    # Ownership and custody: at most one of each at any time
    primary_accountable_id = Column(Uuid(as_uuid=True), ForeignKey('vf_agent.id'), nullable=True)
    custodian_id = Column(Uuid(as_uuid=True), ForeignKey('vf_agent.id'), nullable=True)

    stage_id = Column(Uuid(as_uuid=True), ForeignKey('vf_process_specification.id'), nullable=True)
    state_id = Column(String(32), nullable=True)  # Action id, e.g. 'pass'|'fail'
    current_location_id = Column(Uuid(as_uuid=True), ForeignKey('vf_spatial_thing.id'), nullable=True)
    lot_id = Column(Uuid(as_uuid=True), ForeignKey('vf_product_batch.id'), nullable=True)
    contained_in_id = Column(Uuid(as_uuid=True), ForeignKey('vf_economic_resource.id', ondelete='SET NULL'), nullable=True)
    unit_of_effort_id = Column(Uuid(as_uuid=True), ForeignKey('vf_unit.id'), nullable=True)

    repo = Column(String(512), nullable=True)
    version = Column(String(256), nullable=True)
    licensor = Column(String(256), nullable=True)
    license = Column(String(256), nullable=True)
    metadata_col = Column('metadata', JSON, nullable=True)

    created_at = Column(DateTime(timezone=True), default=now_utc)
    updated_at = Column(DateTime(timezone=True), default=now_utc, onupdate=now_utc)

    images = relationship("File", back_populates="economic_resource", cascade="all, delete-orphan", order_by="File.created_at")
    conforms_to = relationship("ResourceSpecification", foreign_keys=[conforms_to_id])
    accounting_quantity_has_unit = relationship("Unit", foreign_keys=[accounting_quantity_has_unit_id])
    onhand_quantity_has_unit = relationship("Unit", foreign_keys=[onhand_quantity_has_unit_id])
    primary_accountable = relationship("Agent", foreign_keys=[primary_accountable_id])
    custodian = relationship("Agent", foreign_keys=[custodian_id])
    stage = relationship("ProcessSpecification", foreign_keys=[stage_id])
    current_location = relationship("SpatialThing", foreign_keys=[current_location_id])
    lot = relationship("ProductBatch", foreign_keys=[lot_id])
    contained_in = relationship("EconomicResource", remote_side=[id], foreign_keys=[contained_in_id])
    unit_of_effort = relationship("Unit", foreign_keys=[unit_of_effort_id])

    __table_args__ = (
        Index('idx_vf_economic_resource_primary_accountable_id', 'primary_accountable_id'),
        Index('idx_vf_economic_resource_custodian_id', 'custodian_id'),
        Index('idx_vf_economic_resource_conforms_to_id', 'conforms_to_id'),
    )

    @property
    def accounting_quantity(self) -> Optional[Measure]:
        return _measure(self.accounting_quantity_has_numerical_value, self.accounting_quantity_has_unit)

    @property
    def onhand_quantity(self) -> Optional[Measure]:
        return _measure(self.onhand_quantity_has_numerical_value, self.onhand_quantity_has_unit)

    @property
    def state(self) -> Optional[Action]:
        return get_action(self.state_id)


def _measure(value, unit) -> Optional[Measure]:
    if value is None and unit is None:
        return None
    return Measure(has_numerical_value=value, has_unit=unit)
