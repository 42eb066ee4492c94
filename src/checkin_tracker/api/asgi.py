"""ASGI entrypoint for the checkin tracker API."""

from checkin_tracker.api.app import create_app
from checkin_tracker.containers import build_container

app = create_app(build_container())
