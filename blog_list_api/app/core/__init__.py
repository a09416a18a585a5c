"""Configuration, logging, store access and error handling."""
