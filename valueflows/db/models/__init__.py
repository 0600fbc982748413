"""
Domain-split SQLAlchemy models.

Exposes `Base`, `now_utc`, and all ORM classes so that metadata is complete
once this package is imported.
"""

from .base import Base, now_utc  # re-export

from .units import Unit
from .geo import SpatialThing
from .agents import Agent
from .specifications import ResourceSpecification, ProcessSpecification
from .product_batches import ProductBatch
from .resources import EconomicResource, Measure
from .files import File
from .recipes import RecipeExchange
from .inst_vars import InstVars

__all__ = [
    # base
    "Base",
    "now_utc",
    # vocabulary
    "Unit",
    "SpatialThing",
    "Agent",
    "ResourceSpecification",
    "ProcessSpecification",
    "ProductBatch",
    # resources
    "EconomicResource",
    "Measure",
    "File",
    # recipes
    "RecipeExchange",
    # instance
    "InstVars",
]
