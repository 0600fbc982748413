import uuid
from sqlalchemy import Column, String, Text, DateTime, ForeignKey, CheckConstraint, Uuid
from sqlalchemy.orm import relationship
from .base import Base, now_utc
from ..types import TagArray


class Agent(Base):
    """A person or organization that can be accountable for or hold custody of resources."""
    __tablename__ = 'vf_agent'
    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    type = Column(String(3), nullable=False, default='per')  # 'per'|'org'
    name = Column(String(256), nullable=False)
    note = Column(Text, nullable=True)
    classified_as = Column(TagArray(), nullable=True)
    email = Column(String(256), nullable=True, unique=True)
    primary_location_id = Column(Uuid(as_uuid=True), ForeignKey('vf_spatial_thing.id', ondelete='SET NULL'), nullable=True)
    created_at = Column(DateTime(timezone=True), default=now_utc)
    updated_at = Column(DateTime(timezone=True), default=now_utc, onupdate=now_utc)

    primary_location = relationship("SpatialThing")

    __table_args__ = (
        CheckConstraint("type in ('per','org')", name='ck_vf_agent_type'),
    )
