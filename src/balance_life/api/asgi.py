"""ASGI entrypoint for the BalanceLife API."""

from balance_life.api.app import create_app
from balance_life.containers import build_container

app = create_app(build_container())
