from fastapi import Request

from .storage import Storage


def get_store(request: Request) -> Storage:
    """The store the application was built with."""
    return request.app.state.store
