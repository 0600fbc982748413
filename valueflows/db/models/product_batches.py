import uuid
from sqlalchemy import Column, String, DateTime, Uuid
from .base import Base, now_utc


class ProductBatch(Base):
    __tablename__ = 'vf_product_batch'
    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    batch_number = Column(String(256), nullable=False)
    expiry_date = Column(DateTime(timezone=True), nullable=True)
    production_date = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), default=now_utc)
    updated_at = Column(DateTime(timezone=True), default=now_utc, onupdate=now_utc)
