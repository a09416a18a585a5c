"""Shared fixtures for the Blog List API tests.

Every test runs against a fresh in-memory ``mongomock`` client seeded
with ``INITIAL_BLOGS``.
"""

from typing import Any, Dict, List

import mongomock
import pytest
from fastapi.testclient import TestClient

from blog_list_api.app.core.config import Settings
from blog_list_api.app.core.db import get_collection
from blog_list_api.app.main import create_app
from blog_list_api.app.services.blog_service import BlogService

INITIAL_BLOGS: List[Dict[str, Any]] = [
    {
        "title": "React patterns",
        "author": "Michael Chan",
        "url": "https://reactpatterns.com/",
        "likes": 7,
    },
    {
        "title": "Go To Statement Considered Harmful",
        "author": "Edsger W. Dijkstra",
        "url": "http://www.u.arizona.edu/~rubinson/copyright_violations/Go_To_Considered_Harmful.html",
        "likes": 5,
    },
    {
        "title": "Canonical string reduction",
        "author": "Edsger W. Dijkstra",
        "url": "http://www.cs.utexas.edu/~EWD/transcriptions/EWD08xx/EWD808.html",
        "likes": 12,
    },
    {
        "title": "First class tests",
        "author": "Robert C. Martin",
        "url": "http://blog.cleancoder.com/uncle-bob/2017/05/05/TestDefinitions.htmll",
        "likes": 10,
    },
    {
        "title": "TDD harms architecture",
        "author": "Robert C. Martin",
        "url": "http://blog.cleancoder.com/uncle-bob/2017/03/03/TDD-Harms-Architecture.html",
        "likes": 0,
    },
    {
        "title": "Type wars",
        "author": "Robert C. Martin",
        "url": "http://blog.cleancoder.com/uncle-bob/2016/05/01/TypeWars.html",
        "likes": 2,
    },
]


@pytest.fixture
def settings() -> Settings:
    return Settings(mongodb_db="bloglist_test", blogs_collection="blogs")


@pytest.fixture
def mongo_client():
    client = mongomock.MongoClient()
    yield client
    client.close()


@pytest.fixture
def collection(mongo_client, settings):
    return get_collection(mongo_client, settings)


@pytest.fixture
def service(collection) -> BlogService:
    """Service over a collection reset to ``INITIAL_BLOGS``."""
    service = BlogService(collection)
    service.delete_all()
    service.insert_many(INITIAL_BLOGS)
    return service


@pytest.fixture
def app(mongo_client, settings, service):
    return create_app(mongo_client=mongo_client, config=settings)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def blogs_in_db(service):
    """Return a callable listing the stored blogs as external records."""

    def _blogs_in_db() -> List[Dict[str, Any]]:
        return [blog.model_dump() for blog in service.list_blogs()]

    return _blogs_in_db
