"""Dispatch endpoints backed by mock providers."""

from fastapi import APIRouter, Depends, HTTPException

from app.models.dispatch import Failure
from app.providers.directory.mock_directory import MockUserDirectory
from app.providers.messaging.mock_messaging import AlwaysDeliverTransport
from app.schemas.dispatch import DeliveryResultSchema, DispatchRequest, DispatchResponse
from app.services.message_dispatcher import MessageDispatcher

router = APIRouter()

# Shared service instances for local execution.
message_dispatcher = MessageDispatcher(
    directory=MockUserDirectory(),
    transport=AlwaysDeliverTransport(),
)


def get_message_dispatcher() -> MessageDispatcher:
    """Provide the shared dispatcher; overridden in tests."""
    return message_dispatcher


@router.post("/messages/dispatch", response_model=DispatchResponse)
def dispatch_message(
    payload: DispatchRequest,
    dispatcher: MessageDispatcher = Depends(get_message_dispatcher),
) -> DispatchResponse:
    """Send one message to the listed users and report per-user status."""
    outcome = dispatcher.dispatch(payload.user_ids, payload.message)
    if isinstance(outcome, Failure):
        raise HTTPException(status_code=400, detail=outcome.error)
    return DispatchResponse(
        results=[DeliveryResultSchema(id=result.id, status=result.status) for result in outcome.results]
    )
