"""Queries - read operations. Query handlers never receive notifiers."""
