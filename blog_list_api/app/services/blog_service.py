"""
Service layer for blog records.

``BlogService`` wraps the pymongo collection injected by the API
layer.  Writes are validated with ``validate_for_create`` before the
store is touched, and every record handed back is passed through
``to_external`` so the ``_id`` and ``__v`` fields of stored documents
never leak.  Store errors are not caught here; they propagate to the
application's error handlers.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, List

from bson import ObjectId
from fastapi import Depends
from pymongo.collection import Collection

from blog_list_api.app.core.db import get_blog_collection
from blog_list_api.app.core.errors import BlogNotFoundError
from blog_list_api.app.schemas.blog import BlogRead, to_external, validate_for_create

logger = logging.getLogger(__name__)


class BlogService:
    """CRUD operations over the blogs collection."""

    def __init__(self, collection: Collection) -> None:
        self.collection = collection

    def list_blogs(self) -> List[BlogRead]:
        """Return every blog in the store's natural order."""
        return [BlogRead(**to_external(doc)) for doc in self.collection.find()]

    def get_blog(self, blog_id: str) -> BlogRead:
        """Retrieve a single blog by its identifier.

        Malformed identifiers are reported the same way as missing
        ones, with ``BlogNotFoundError``.
        """
        if not ObjectId.is_valid(blog_id):
            raise BlogNotFoundError(f"Blog {blog_id} not found")
        document = self.collection.find_one({"_id": ObjectId(blog_id)})
        if document is None:
            raise BlogNotFoundError(f"Blog {blog_id} not found")
        return BlogRead(**to_external(document))

    def create_blog(self, payload: Any) -> BlogRead:
        """Validate ``payload``, insert it and return the stored record.

        The store assigns the identifier; any identifier in the payload
        is discarded during validation.
        """
        data = validate_for_create(payload)
        result = self.collection.insert_one(data.to_document())
        document = self.collection.find_one({"_id": result.inserted_id})
        logger.info("Created blog %s", result.inserted_id)
        return BlogRead(**to_external(document))

    def insert_many(self, payloads: Iterable[Any]) -> List[BlogRead]:
        """Validate and insert several blogs at once, keeping their order.

        Nothing is written if any payload fails validation.
        """
        documents = [validate_for_create(p).to_document() for p in payloads]
        if not documents:
            return []
        result = self.collection.insert_many(documents)
        logger.info("Inserted %d blogs", len(result.inserted_ids))
        return [
            BlogRead(**to_external({**doc, "_id": blog_id}))
            for doc, blog_id in zip(documents, result.inserted_ids)
        ]

    def delete_blog(self, blog_id: str) -> bool:
        """Delete a blog by identifier.

        Returns ``True`` if a document was removed.  Missing and
        malformed identifiers are not errors.
        """
        if not ObjectId.is_valid(blog_id):
            logger.debug("Ignoring delete of malformed id %r", blog_id)
            return False
        result = self.collection.delete_one({"_id": ObjectId(blog_id)})
        if result.deleted_count:
            logger.info("Deleted blog %s", blog_id)
        return result.deleted_count > 0

    def delete_all(self) -> int:
        """Remove every blog and return how many were deleted."""
        result = self.collection.delete_many({})
        logger.info("Deleted %d blogs", result.deleted_count)
        return result.deleted_count


def get_blog_service(collection: Collection = Depends(get_blog_collection)) -> BlogService:
    """FastAPI dependency building a ``BlogService`` for the request."""
    return BlogService(collection)
