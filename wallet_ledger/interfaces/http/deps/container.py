"""Application container dependency provider."""

from fastapi import Request

from wallet_ledger.core.container import ApplicationContainer


def get_container(request: Request) -> ApplicationContainer:
    return request.app.state.container


__all__ = ["get_container"]
