"""Pytest configuration and fixtures."""

import os

# Tests manage the schema and data themselves
os.environ.setdefault("CREATE_SCHEMA", "false")
os.environ.setdefault("LOAD_SAMPLE_DATA", "false")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402

from recipe_app.bootstrap import load_reference_data  # noqa: E402
from recipe_app.database import Base, enable_sqlite_foreign_keys, get_db  # noqa: E402
from recipe_app.main import app  # noqa: E402
from recipe_app.repositories.reference import (  # noqa: E402
    CategoryRepository,
    UnitOfMeasureRepository,
)

# Use test database - PostgreSQL when TEST_DATABASE_URL is set, SQLite locally
SQLALCHEMY_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite:///./test.db")

connect_args = {"check_same_thread": False} if "sqlite" in SQLALCHEMY_DATABASE_URL else {}
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args=connect_args)
if "sqlite" in SQLALCHEMY_DATABASE_URL:
    enable_sqlite_foreign_keys(engine)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    if "postgresql" in SQLALCHEMY_DATABASE_URL:
        from sqlalchemy_utils import create_database, database_exists

        if not database_exists(SQLALCHEMY_DATABASE_URL):
            create_database(SQLALCHEMY_DATABASE_URL)

    from recipe_app import models  # noqa: F401

    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture(scope="function", autouse=True)
def db():
    """Create a fresh database session for each test with cleanup."""
    session = TestingSessionLocal()

    yield session

    # Clean up all data after test
    session.rollback()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
    session.close()


@pytest.fixture(scope="function")
def client(db):
    """Create a test client with database override."""

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def reference_data(db):
    """Load categories and units of measure, keyed by description."""
    load_reference_data(db)
    return {
        "categories": {c.description: c for c in CategoryRepository(db).find_all()},
        "uoms": {u.description: u for u in UnitOfMeasureRepository(db).find_all()},
    }


@pytest.fixture
def guacamole(db, reference_data):
    """Persist a recipe with notes, two ingredients and two categories."""
    from recipe_app.schemas import RecipeCommand
    from recipe_app.services.recipe_service import RecipeService

    uoms = reference_data["uoms"]
    categories = reference_data["categories"]
    command = RecipeCommand(
        description="Perfect Guacamole",
        prep_time=10,
        cook_time=0,
        servings=4,
        source="Simply Recipes",
        directions="Mash the avocados.",
        difficulty="EASY",
        notes={"recipe_notes": "Still great"},
        ingredients=[
            {"description": "ripe avocados", "amount": "2", "uom": {"id": uoms["Each"].id}},
            {"description": "Kosher salt", "amount": "0.5", "uom": {"id": uoms["Teaspoon"].id}},
        ],
        categories=[{"id": categories["Mexican"].id}, {"id": categories["American"].id}],
    )
    return RecipeService(db).save_recipe_command(command)
