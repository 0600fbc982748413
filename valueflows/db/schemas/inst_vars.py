from pydantic import BaseModel, ConfigDict

from .vocabulary import ResourceSpecification, Unit


class InstVars(BaseModel):
    unit_one: Unit
    spec_currency: ResourceSpecification
    spec_project_design: ResourceSpecification
    spec_project_service: ResourceSpecification
    spec_project_product: ResourceSpecification
    model_config = ConfigDict(from_attributes=True)
