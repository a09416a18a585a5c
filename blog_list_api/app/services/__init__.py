"""
Service layer abstraction.

Each service encapsulates the store access for a collection so that
API handlers never touch pymongo directly.
"""
