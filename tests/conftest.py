"""Shared fixtures: in-memory database, fake AI endpoints and an API client."""

import json
import random

import httpx
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from database.models import Base
from database.deps import get_db_read, get_db_write
from services.ai_meal_plan import AIMealPlanService
from services.food_analysis import FoodAnalysisService


def chat_response(content, status_code=200):
    """httpx response carrying one chat-completion choice."""
    return httpx.Response(status_code, json={"choices": [{"message": {"content": content}}]})


def mock_transport(handler, calls=None):
    """MockTransport that records each request payload into `calls`."""
    def wrapped(request):
        if calls is not None:
            calls.append(json.loads(request.content))
        return handler(request)
    return httpx.MockTransport(wrapped)


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine):
    session = sessionmaker(bind=engine)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def offline_generator():
    """Meal-plan generator with no key configured: always the fallback."""
    return AIMealPlanService(api_key="", rng=random.Random(7))


@pytest.fixture
def offline_analyzer():
    return FoodAnalysisService(api_key="", rng=random.Random(3))


@pytest.fixture
def client(engine, offline_generator, offline_analyzer):
    from main import app
    from api.food_analysis import get_food_analyzer
    from api.meal_plans import get_meal_plan_generator

    Session = sessionmaker(bind=engine)

    def override_db():
        session = Session()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db_read] = override_db
    app.dependency_overrides[get_db_write] = override_db
    app.dependency_overrides[get_meal_plan_generator] = lambda: offline_generator
    app.dependency_overrides[get_food_analyzer] = lambda: offline_analyzer
    yield TestClient(app)
    app.dependency_overrides.clear()
