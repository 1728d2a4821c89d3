"""ASGI entrypoint for the food equivalences API."""

from food_equivalences.api.app import create_app
from food_equivalences.containers import build_container

app = create_app(build_container())
