"""Routers mounted by ``api.server.create_app``."""
