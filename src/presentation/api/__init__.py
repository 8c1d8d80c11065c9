"""API support module - ASGI middleware shared by all routers."""
