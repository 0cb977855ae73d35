"""ASGI entrypoint for running the portal locally.

The container holds one session for the whole process, so serve it for a
single user, e.g. ``uvicorn tts_portal.api.asgi:app``.
"""

from tts_portal.api.app import create_app
from tts_portal.containers import build_container

app = create_app(build_container())
