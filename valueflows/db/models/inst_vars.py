from sqlalchemy import Column, Integer, ForeignKey, CheckConstraint, Uuid
from sqlalchemy.orm import relationship
from .base import Base


class InstVars(Base):
    """System-wide defaults. Exactly one row exists once the instance is seeded.

    Only read and written through ``repositories.inst_vars`` and the seeding
    migration.
    """
    __tablename__ = 'zf_inst_vars'
    id = Column(Integer, primary_key=True, default=1)
    unit_one_id = Column(Uuid(as_uuid=True), ForeignKey('vf_unit.id'), nullable=False)
    spec_currency_id = Column(Uuid(as_uuid=True), ForeignKey('vf_resource_specification.id'), nullable=False)
    spec_project_design_id = Column(Uuid(as_uuid=True), ForeignKey('vf_resource_specification.id'), nullable=False)
    spec_project_service_id = Column(Uuid(as_uuid=True), ForeignKey('vf_resource_specification.id'), nullable=False)
    spec_project_product_id = Column(Uuid(as_uuid=True), ForeignKey('vf_resource_specification.id'), nullable=False)

    unit_one = relationship("Unit", foreign_keys=[unit_one_id])
    spec_currency = relationship("ResourceSpecification", foreign_keys=[spec_currency_id])
    spec_project_design = relationship("ResourceSpecification", foreign_keys=[spec_project_design_id])
    spec_project_service = relationship("ResourceSpecification", foreign_keys=[spec_project_service_id])
    spec_project_product = relationship("ResourceSpecification", foreign_keys=[spec_project_product_id])

    __table_args__ = (
        CheckConstraint("id = 1", name='ck_zf_inst_vars_singleton'),
    )
