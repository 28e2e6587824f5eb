import json
import logging

from fastapi import APIRouter, Depends, Request

from app.api.errors import error_response
from app.core.errors import InvalidInput, MalformedBody, UpstreamFailure
from app.core.settings import Settings, get_settings
from app.dependencies import get_conversation_relay
from app.models.chat import ChatRequest, ChatResponse, ErrorResponse
from app.services.relay_service import ConversationRelay

logger = logging.getLogger(__name__)

router = APIRouter()


async def read_chat_request(request: Request) -> ChatRequest:
    # Parsed whatever the Content-Type: browsers send text/plain to skip preflight.
    body = await request.body()
    if not body.strip():
        return ChatRequest()

    try:
        payload = json.loads(body)
    except ValueError as e:
        # UnicodeDecodeError is a ValueError too.
        raise MalformedBody(str(e)) from e

    if not isinstance(payload, dict):
        return ChatRequest()
    return ChatRequest.model_validate(payload)


@router.post(
    "/chat",
    response_model=ChatResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def chat_endpoint(
    request: Request,
    relay: ConversationRelay = Depends(get_conversation_relay),
    settings: Settings = Depends(get_settings),
):
    try:
        chat_request = await read_chat_request(request)
        response_text = await relay.reply(
            message=chat_request.message,
            history=chat_request.history,
        )
    except MalformedBody as e:
        logger.warning("Malformed JSON body on %s: %s", request.url.path, e.details)
        return error_response(400, str(e), e.details)
    except InvalidInput as e:
        return error_response(400, str(e))
    except UpstreamFailure as e:
        logger.exception("Chat endpoint failed")
        details = e.details if settings.expose_error_details else None
        return error_response(500, "Internal server error", details)

    return ChatResponse(response=response_text)
