"""Hotstar clone production web server and catalog API client."""
