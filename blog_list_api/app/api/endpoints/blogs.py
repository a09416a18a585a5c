"""
Blog endpoints.

These routes expose list, retrieve, create and delete for blog
records.  Validation failures and missing records are raised by
``BlogService`` as typed errors and turned into 400/404 responses by
the application's error handlers.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, Response, status

from blog_list_api.app.schemas.blog import BlogRead
from blog_list_api.app.services.blog_service import BlogService, get_blog_service

router = APIRouter()


@router.get("", response_model=List[BlogRead])
@router.get("/", response_model=List[BlogRead], include_in_schema=False)
def list_blogs(service: BlogService = Depends(get_blog_service)) -> List[BlogRead]:
    """Return all blogs."""
    return service.list_blogs()


@router.get("/{blog_id}", response_model=BlogRead)
def get_blog(blog_id: str, service: BlogService = Depends(get_blog_service)) -> BlogRead:
    """Retrieve a single blog by ID.

    Returns HTTP 404 if the blog does not exist or the ID is not a
    valid identifier.
    """
    return service.get_blog(blog_id)


@router.post("", response_model=BlogRead, status_code=status.HTTP_201_CREATED)
@router.post("/", response_model=BlogRead, status_code=status.HTTP_201_CREATED, include_in_schema=False)
def create_blog(
    payload: Dict[str, Any] = Body(...),
    service: BlogService = Depends(get_blog_service),
) -> BlogRead:
    """Create a new blog.

    ``title`` and ``url`` are required; ``likes`` defaults to 0.
    Returns HTTP 400 when validation fails.
    """
    # The raw body is validated by the service so that missing fields
    # give 400 rather than FastAPI's 422.
    return service.create_blog(payload)


@router.delete("/{blog_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_blog(blog_id: str, service: BlogService = Depends(get_blog_service)) -> Response:
    """Delete a blog.  Succeeds even when the blog does not exist."""
    service.delete_blog(blog_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
