"""
API package containing the HTTP routes.

``router.py`` aggregates the domain routers; the application mounts it
under the ``/api`` prefix.
"""
