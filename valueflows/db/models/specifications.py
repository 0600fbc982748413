import uuid
from sqlalchemy import Column, Text, DateTime, ForeignKey, Uuid
from sqlalchemy.orm import relationship
from .base import Base, now_utc
from ..types import TagArray


class ResourceSpecification(Base):
    __tablename__ = 'vf_resource_specification'
    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(Text, nullable=False)
    note = Column(Text, nullable=True)
    resource_classified_as = Column(TagArray(), nullable=True)
    default_unit_of_resource_id = Column(Uuid(as_uuid=True), ForeignKey('vf_unit.id'), nullable=True)
    default_unit_of_effort_id = Column(Uuid(as_uuid=True), ForeignKey('vf_unit.id'), nullable=True)
    created_at = Column(DateTime(timezone=True), default=now_utc)
    updated_at = Column(DateTime(timezone=True), default=now_utc, onupdate=now_utc)

    default_unit_of_resource = relationship("Unit", foreign_keys=[default_unit_of_resource_id])
    default_unit_of_effort = relationship("Unit", foreign_keys=[default_unit_of_effort_id])


class ProcessSpecification(Base):
    """Lifecycle stage a resource can be in (e.g. "inspected", "assembled")."""
    __tablename__ = 'vf_process_specification'
    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(Text, nullable=False)
    note = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), default=now_utc)
    updated_at = Column(DateTime(timezone=True), default=now_utc, onupdate=now_utc)
