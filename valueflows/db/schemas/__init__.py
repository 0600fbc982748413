"""
Domain-split Pydantic schemas with an aggregator.
"""

from .paging import PageParams, PageInfo
from .vocabulary import (
    Unit,
    SpatialThing,
    Agent,
    ResourceSpecification,
    ProcessSpecification,
    ProductBatch,
    File,
)
from .economic_resources import (
    Measure,
    EconomicResource,
    EconomicResourceUpdate,
    EconomicResourceFilter,
    EconomicResourceEdge,
    EconomicResourceConnection,
)
from .recipes import (
    RecipeExchangeBase,
    RecipeExchangeCreate,
    RecipeExchangeUpdate,
    RecipeExchange,
)
from .inst_vars import InstVars

__all__ = [
    # Paging
    "PageParams",
    "PageInfo",
    # Vocabulary
    "Unit",
    "SpatialThing",
    "Agent",
    "ResourceSpecification",
    "ProcessSpecification",
    "ProductBatch",
    "File",
    # Economic resources
    "Measure",
    "EconomicResource",
    "EconomicResourceUpdate",
    "EconomicResourceFilter",
    "EconomicResourceEdge",
    "EconomicResourceConnection",
    # Recipes
    "RecipeExchangeBase",
    "RecipeExchangeCreate",
    "RecipeExchangeUpdate",
    "RecipeExchange",
    # Instance
    "InstVars",
]
