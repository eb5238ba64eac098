from fastapi import Request

from shared.config.settings import Settings


def get_object_store(request: Request):
    return request.app.state.object_store


def get_settings(request: Request) -> Settings:
    return request.app.state.settings
