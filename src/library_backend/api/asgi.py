"""ASGI entrypoint for the library backend API."""

from library_backend.api.app import create_app
from library_backend.containers import build_container

app = create_app(build_container())
