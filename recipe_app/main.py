"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError

from recipe_app.api import images, index, ingredients, recipes
from recipe_app.config import get_settings
from recipe_app.database import SessionLocal, init_db
from recipe_app.exceptions import NotFoundException, ValidationException
from recipe_app.templating import render

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    if settings.create_schema:
        init_db()
    if settings.load_sample_data:
        from recipe_app.bootstrap import bootstrap

        db = SessionLocal()
        try:
            bootstrap(db)
        finally:
            db.close()
    yield


app = FastAPI(
    title="Recipe App",
    description="Recipes with notes, ingredients and categories",
    version="0.1.0",
    lifespan=lifespan,
)


@app.exception_handler(NotFoundException)
async def handle_not_found(request: Request, exc: NotFoundException):
    logger.warning(f"Handling not found exception: {exc.message}")
    return render(
        request, "404error", {"exception": exc}, status_code=status.HTTP_404_NOT_FOUND
    )


@app.exception_handler(ValidationException)
async def handle_validation_failure(request: Request, exc: ValidationException):
    logger.warning(f"Handling validation failure: {exc.message}")
    return render(
        request, "400error", {"exception": exc}, status_code=status.HTTP_400_BAD_REQUEST
    )


@app.exception_handler(RequestValidationError)
async def handle_bad_request(request: Request, exc: RequestValidationError):
    logger.warning(f"Handling bad request: {exc.errors()}")
    return render(
        request, "400error", {"exception": exc}, status_code=status.HTTP_400_BAD_REQUEST
    )


# Register routers
app.include_router(index.router)
app.include_router(recipes.router)
app.include_router(ingredients.router)
app.include_router(images.router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "environment": settings.environment}
