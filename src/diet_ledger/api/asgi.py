"""ASGI entrypoint for the diet ledger API."""

from diet_ledger.api.app import create_app
from diet_ledger.containers import build_container

app = create_app(build_container())
