"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
"""

import logging

from asgiref.sync import async_to_sync
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from event_tickets.domain.errors import (
    DomainError,
    ErrorCode,
    InvalidParameterError,
    QueryFailedError,
)
from event_tickets.handlers.serializers import (
    ErrorSerializer,
    TicketPageSerializer,
    TrendingTicketsSerializer,
)
from event_tickets.services import TicketService
from event_tickets.services.ticket_service import DEFAULT_LIMIT, MAX_LIMIT
from event_tickets.stores.django_store import DjangoTicketStore

logger = logging.getLogger(__name__)

CATEGORY_PAGE_LIMIT = 8


def get_ticket_service() -> TicketService:
    return TicketService(DjangoTicketStore())


def _int_param(request: Request, name: str, default: int) -> int:
    try:
        return int(request.query_params.get(name, default))
    except (TypeError, ValueError):
        return default


def _parse_page(request: Request) -> int:
    page = _int_param(request, "page", 1)
    if page < 1:
        raise InvalidParameterError("page", "Page number must be greater than 0")
    return page


def _parse_limit(request: Request) -> int:
    limit = _int_param(request, "limit", DEFAULT_LIMIT)
    if limit < 1 or limit > MAX_LIMIT:
        raise InvalidParameterError("limit", f"Limit must be between 1 and {MAX_LIMIT}")
    return limit


def _parse_category(category: str | None) -> str:
    if category is None or not category.strip():
        raise InvalidParameterError("category", "Category parameter is required")
    return category


def _error_response(error: DomainError, status_code: int) -> Response:
    return Response(ErrorSerializer(error).data, status=status_code)


def _server_error(action: str, exc: Exception) -> Response:
    logger.exception("Error fetching %s", action)
    if isinstance(exc, QueryFailedError):
        return _error_response(exc, status.HTTP_500_INTERNAL_SERVER_ERROR)
    error = DomainError(
        code=ErrorCode.INTERNAL_ERROR,
        message=f"Failed to fetch {action}: {str(exc) or 'Unknown error'}",
    )
    return _error_response(error, status.HTTP_500_INTERNAL_SERVER_ERROR)


def _bad_request(error: InvalidParameterError) -> Response:
    logger.warning("Rejected request: invalid %s (%s)", error.parameter, error.message)
    return _error_response(error, status.HTTP_400_BAD_REQUEST)


class TicketListView(APIView):
    """Handler for GET /api/event-tickets/"""

    def get(self, request: Request) -> Response:
        try:
            page = _parse_page(request)
            limit = _parse_limit(request)
        except InvalidParameterError as error:
            return _bad_request(error)

        service = get_ticket_service()
        try:
            result = async_to_sync(service.list_tickets)(page, limit)
        except Exception as exc:
            return _server_error("event tickets", exc)
        return Response(TicketPageSerializer(result).data, status=status.HTTP_200_OK)


class TicketCategoryListView(APIView):
    """Handler for GET /api/event-tickets/category/{category}"""

    def get(self, request: Request, category: str | None = None) -> Response:
        try:
            category = _parse_category(category)
            page = _parse_page(request)
        except InvalidParameterError as error:
            return _bad_request(error)

        service = get_ticket_service()
        try:
            result = async_to_sync(service.list_tickets_by_category)(
                category, page, CATEGORY_PAGE_LIMIT
            )
        except Exception as exc:
            return _server_error("event tickets by category", exc)
        return Response(TicketPageSerializer(result).data, status=status.HTTP_200_OK)


class TrendingTicketListView(APIView):
    """Handler for GET /api/event-tickets/trending"""

    def get(self, request: Request) -> Response:
        service = get_ticket_service()
        try:
            result = async_to_sync(service.list_trending_tickets)()
        except Exception as exc:
            return _server_error("trending event tickets", exc)
        return Response(TrendingTicketsSerializer(result).data, status=status.HTTP_200_OK)
