"""
PRESENTATION LAYER - HTTP boundary.

Maps JSON payloads to requests, dispatches them and maps responses and
pipeline errors back to HTTP. No business logic lives here.
"""
