"""
Fixtures for HTTP-level tests of the classification API
"""
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from application.services.template_classifier import TemplateClassifier
from domain.templates import ALL_TEMPLATES
from infrastructure.web.classification_api import router, get_classifier


def build_app(classifier: TemplateClassifier) -> FastAPI:
    app = FastAPI()
    app.include_router(router)
    app.dependency_overrides[get_classifier] = lambda: classifier
    return app


@pytest.fixture
def app_factory():
    return build_app


@pytest.fixture
def client():
    """Client for the classification router over the built-in catalog"""
    with TestClient(build_app(TemplateClassifier(ALL_TEMPLATES))) as test_client:
        yield test_client


@pytest.fixture
def empty_catalog_client():
    with TestClient(build_app(TemplateClassifier([]))) as test_client:
        yield test_client


@pytest.fixture
def app_client():
    """Client for the full application, lifespan included"""
    from main import app

    with TestClient(app) as test_client:
        yield test_client
