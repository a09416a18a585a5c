"""
Application package initializer.

The project is organised into small layers: ``core`` holds
configuration, logging, store access and the error taxonomy;
``schemas`` defines the blog entity and its external representation;
``services`` talks to the document store; ``api`` exposes the HTTP
routes.
"""

from .main import app  # noqa: F401
