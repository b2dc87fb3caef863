"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

from collections.abc import Callable

from django.core.cache import cache
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from agenda.cache import (
    EVENT_LIST_KEY,
    event_key,
    event_occurrences_key,
    occurrences_on_key,
    timeout,
)
from agenda.domain import EventId, normalize_date
from agenda.domain.errors import DomainError, ErrorCode, InvalidDateError
from agenda.handlers.serializers import EventRuleSerializer, EventSerializer, OccurrenceSerializer
from agenda.services.event_service import EventService
from agenda.stores.django_store import DjangoEventStore

ERROR_STATUS = {
    ErrorCode.INVALID_EVENT_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_DATE: status.HTTP_400_BAD_REQUEST,
    ErrorCode.EVENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.EVENT_SAVE_FAILED: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorCode.EVENT_FETCH_FAILED: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorCode.OCCURRENCE_FETCH_FAILED: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def get_event_service() -> EventService:
    return EventService(DjangoEventStore())


def error_response(error: DomainError) -> Response:
    return Response(
        {"code": error.code.value, "message": error.message},
        status=ERROR_STATUS.get(error.code, status.HTTP_500_INTERNAL_SERVER_ERROR),
    )


def cached(key: str | None, load: Callable[[], object]) -> object:
    """Return the cached value under ``key``, loading and storing it on a miss."""
    if key is None:
        return load()
    data = cache.get(key)
    if data is None:
        data = load()
        cache.set(key, data, timeout())
    return data


def _event_cache_key(event_id: str, key_for: Callable[[object], str]) -> str | None:
    try:
        return key_for(EventId.from_string(event_id))
    except ValueError:
        return None


class EventListView(APIView):
    """Handler for GET and POST /api/events"""

    def get(self, request: Request) -> Response:
        service = get_event_service()
        try:
            data = cached(
                EVENT_LIST_KEY,
                lambda: EventSerializer(service.list_events(), many=True).data,
            )
        except DomainError as error:
            return error_response(error)
        return Response(data)

    def post(self, request: Request) -> Response:
        serializer = EventRuleSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            event_id = get_event_service().create_event(serializer.to_rule())
        except DomainError as error:
            return error_response(error)
        return Response({"event_id": str(event_id)}, status=status.HTTP_201_CREATED)


class EventPreviewView(APIView):
    """Handler for POST /api/events/preview"""

    def post(self, request: Request) -> Response:
        serializer = EventRuleSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        dates = get_event_service().preview(serializer.to_rule())
        return Response({"dates": [day.isoformat() for day in dates]})


class EventDetailView(APIView):
    """Handler for GET /api/events/{event_id}"""

    def get(self, request: Request, event_id: str) -> Response:
        service = get_event_service()
        try:
            data = cached(
                _event_cache_key(event_id, event_key),
                lambda: EventSerializer(service.get_event(event_id)).data,
            )
        except DomainError as error:
            return error_response(error)
        return Response(data)


class EventOccurrenceListView(APIView):
    """Handler for GET /api/events/{event_id}/occurrences"""

    def get(self, request: Request, event_id: str) -> Response:
        service = get_event_service()
        try:
            data = cached(
                _event_cache_key(event_id, event_occurrences_key),
                lambda: OccurrenceSerializer(
                    service.get_occurrences_for_event(event_id), many=True
                ).data,
            )
        except DomainError as error:
            return error_response(error)
        return Response(data)


class OccurrencesByDateView(APIView):
    """Handler for GET /api/occurrences?date=YYYY-MM-DD"""

    def get(self, request: Request) -> Response:
        try:
            day = normalize_date(request.query_params.get("date", ""))
        except (ValueError, OverflowError):
            return error_response(InvalidDateError())

        service = get_event_service()
        try:
            data = cached(
                occurrences_on_key(day),
                lambda: OccurrenceSerializer(service.get_occurrences_on(day), many=True).data,
            )
        except DomainError as error:
            return error_response(error)
        return Response(data)
