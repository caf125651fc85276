"""Application setup - dependency injection."""
