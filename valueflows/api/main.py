"""
FastAPI app assembly: logging, error mapping and router wiring.
"""
import logging

from fastapi import Depends, FastAPI
from sqlalchemy.orm import Session
from starlette.requests import Request
from starlette.responses import JSONResponse

from valueflows import __version__
from valueflows.utils.settings import get_settings

# Configure logging
LOG_LEVEL_NAME = get_settings().log_level
LOG_LEVEL = getattr(logging, LOG_LEVEL_NAME, logging.INFO)
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)
logger.setLevel(LOG_LEVEL)
logger.info("app_startup: log_level=%s", LOG_LEVEL_NAME)

from valueflows.db import schemas
from valueflows.db.database import get_db
from valueflows.db.errors import NotFoundError, StorageFault, ValidationError
from valueflows.db.repositories import inst_vars as inst_vars_repo
from valueflows.api.economic_resources import router as economic_resources_router
from valueflows.api.recipe_exchanges import router as recipe_exchanges_router

# Database schema is managed by Alembic migrations.

app = FastAPI(
    title="Valueflows Resource Service",
    description="API for economic resources, recipe exchanges and instance defaults.",
    version=__version__,
)

# Avoid implicit trailing-slash redirects for predictable URLs
app.router.redirect_slashes = False


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    return JSONResponse(status_code=404, content={"detail": exc.message})


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    return JSONResponse(status_code=422, content={"detail": "validation failed", "errors": exc.as_list()})


@app.exception_handler(StorageFault)
async def storage_fault_handler(request: Request, exc: StorageFault):
    logger.error("storage_fault: path=%s error=%s", request.url.path, exc.original or exc)
    return JSONResponse(status_code=500, content={"detail": "storage failure"})


@app.get("/health")
def health():
    return {"status": "ok", "version": __version__}


@app.get("/inst-vars", response_model=schemas.InstVars)
def get_inst_vars_endpoint(db: Session = Depends(get_db)):
    return inst_vars_repo.get_inst_vars(db)


app.include_router(economic_resources_router)
app.include_router(recipe_exchanges_router)
