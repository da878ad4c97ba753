from fastapi import Request

from store import Store


def get_store(request: Request) -> Store:
    """
    Shared Store for this app instance, built once in the lifespan handler.
    """
    return request.app.state.store
