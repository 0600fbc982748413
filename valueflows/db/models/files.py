import uuid
from sqlalchemy import Column, String, Text, DateTime, Integer, ForeignKey, Index, Uuid
from sqlalchemy.orm import relationship
from .base import Base, now_utc


class File(Base):
    """Image attached to an economic resource."""
    __tablename__ = 'zf_file'
    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    hash = Column(String(128), nullable=False)
    name = Column(String(256), nullable=False)
    description = Column(Text, nullable=True)
    mime_type = Column(String(128), nullable=False)
    extension = Column(String(16), nullable=False)
    size = Column(Integer, nullable=False)
    signature = Column(Text, nullable=True)
    width = Column(Integer, nullable=True)
    height = Column(Integer, nullable=True)
    url = Column(String(512), nullable=True)
    economic_resource_id = Column(Uuid(as_uuid=True), ForeignKey('vf_economic_resource.id', ondelete='CASCADE'), nullable=True)
    created_at = Column(DateTime(timezone=True), default=now_utc)

    economic_resource = relationship("EconomicResource", back_populates="images")

    __table_args__ = (
        Index('idx_zf_file_economic_resource_id', 'economic_resource_id'),
    )
