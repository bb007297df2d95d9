"""HTTP route serving the configured greeting."""

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from greeter.api import deps
from greeter.services.message import MessageProvider

router = APIRouter(tags=["greeting"])


@router.api_route("/", methods=["GET", "HEAD"], response_class=PlainTextResponse)
async def home(
    provider: MessageProvider = Depends(deps.get_message_provider),
) -> PlainTextResponse:
    """Return the configured message as the full text/plain body."""

    return PlainTextResponse(provider.get())
