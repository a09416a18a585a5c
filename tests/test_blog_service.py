"""Tests for BlogService against a mongomock collection."""

import pytest
from bson import ObjectId

from blog_list_api.app.core.errors import BlogNotFoundError, BlogValidationError

from .conftest import INITIAL_BLOGS


def test_list_preserves_insertion_order(service):
    titles = [blog.title for blog in service.list_blogs()]
    assert titles == [blog["title"] for blog in INITIAL_BLOGS]


def test_stored_documents_carry_version_marker(service, collection):
    document = collection.find_one({"title": "React patterns"})
    assert document["__v"] == 0
    assert isinstance(document["_id"], ObjectId)


def test_create_assigns_store_identifier(service, collection):
    supplied = "6a422b3a1b54a676234d17f9"
    blog = service.create_blog({"_id": supplied, "title": "T", "url": "http://t"})
    assert blog.id != supplied
    assert collection.find_one({"_id": ObjectId(blog.id)})["title"] == "T"
    assert collection.count_documents({}) == len(INITIAL_BLOGS) + 1


def test_create_rejects_before_touching_store(service, collection):
    with pytest.raises(BlogValidationError):
        service.create_blog({"author": "nobody"})
    assert collection.count_documents({}) == len(INITIAL_BLOGS)


def test_insert_many_is_all_or_nothing(service, collection):
    with pytest.raises(BlogValidationError):
        service.insert_many([{"title": "ok", "url": "http://ok"}, {"title": "no url"}])
    assert collection.count_documents({}) == len(INITIAL_BLOGS)


def test_insert_many_with_nothing_to_insert(service):
    assert service.insert_many([]) == []


def test_get_blog_round_trip(service):
    first = service.list_blogs()[0]
    assert service.get_blog(first.id) == first


@pytest.mark.parametrize("blog_id", ["not-an-id", "", str(ObjectId())])
def test_get_blog_not_found(service, blog_id):
    with pytest.raises(BlogNotFoundError):
        service.get_blog(blog_id)


def test_delete_blog_reports_removal(service):
    blog_id = service.list_blogs()[0].id
    assert service.delete_blog(blog_id) is True
    assert service.delete_blog(blog_id) is False
    assert service.delete_blog("not-an-id") is False
    assert len(service.list_blogs()) == len(INITIAL_BLOGS) - 1


def test_delete_all(service):
    assert service.delete_all() == len(INITIAL_BLOGS)
    assert service.list_blogs() == []
