import uuid
from sqlalchemy import Column, Text, DateTime, Uuid
from .base import Base, now_utc


class RecipeExchange(Base):
    """Specifies an exchange agreement as part of a recipe."""
    __tablename__ = 'vf_recipe_exchange'
    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(Text, nullable=False)
    note = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), default=now_utc)
    updated_at = Column(DateTime(timezone=True), default=now_utc, onupdate=now_utc)
