"""ASGI entrypoint for the Little Fridge API."""

from little_fridge.api.app import create_app
from little_fridge.containers import build_container

app = create_app(build_container())
