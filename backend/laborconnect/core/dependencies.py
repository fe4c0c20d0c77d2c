"""
FastAPI dependencies resolving app-scoped services
"""
from fastapi import Request
from starlette.requests import HTTPConnection
from .config import Settings
from ..storage.base import EntityStore
from ..services.chat_relay import ChatRelay


def get_settings(connection: HTTPConnection) -> Settings:
    return connection.app.state.settings


def get_store(request: Request) -> EntityStore:
    """Entity store constructed by create_app"""
    return request.app.state.store


def get_chat_relay(connection: HTTPConnection) -> ChatRelay:
    return connection.app.state.chat_relay
