"""Blog List API: a FastAPI service for blog records stored in MongoDB."""
