import uuid
from sqlalchemy import Column, String, DateTime, Uuid
from .base import Base, now_utc


class Unit(Base):
    __tablename__ = 'vf_unit'
    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    label = Column(String(256), nullable=False)
    symbol = Column(String(64), nullable=False)
    created_at = Column(DateTime(timezone=True), default=now_utc)
    updated_at = Column(DateTime(timezone=True), default=now_utc, onupdate=now_utc)
