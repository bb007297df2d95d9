"""Dependency providers used by FastAPI endpoints.

The message provider is built once by `create_application` and parked on
`app.state`; handlers receive it from the request context here so route
functions stay thin and never reach for module globals.
"""

from fastapi import Request

from greeter.services.message import MessageProvider


def get_message_provider(request: Request) -> MessageProvider:
    """Return the MessageProvider owned by the running application."""
    return request.app.state.message_provider
