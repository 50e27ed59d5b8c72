"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

from django.core.cache import cache
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from program.config import get_schedule_settings
from program.domain.errors import DomainError, ErrorCode
from program.handlers.serializers import (
    ItemCountSerializer,
    ItemRegulationSerializer,
    ProgramSerializer,
)
from program.logging import get_logger
from program.services import ProgramService
from program.stores.django_store import DjangoRegistrationStore

logger = get_logger(__name__)

PROGRAM_CACHE_KEY = "program:schedule"
ITEM_COUNTS_CACHE_KEY = "program:item_counts"

_STATUS_FOR_ERROR = {
    ErrorCode.UNKNOWN_CATEGORY: status.HTTP_400_BAD_REQUEST,
    ErrorCode.CATEGORY_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.UNMAPPED_CATEGORY: status.HTTP_409_CONFLICT,
}


def get_program_service() -> ProgramService:
    return ProgramService(
        store=DjangoRegistrationStore(),
        settings=get_schedule_settings(),
    )


def error_response(error: DomainError) -> Response:
    http_status = _STATUS_FOR_ERROR.get(
        error.code, status.HTTP_500_INTERNAL_SERVER_ERROR
    )
    logger.warning("domain_error", code=error.code.value, status=http_status)
    return Response(
        {"error": {"code": error.code.value, "message": error.message}},
        status=http_status,
    )


class ProgramView(APIView):
    """Handler for GET /api/program"""

    def get(self, request: Request) -> Response:
        cached = cache.get(PROGRAM_CACHE_KEY)
        if cached is not None:
            return Response(cached)

        service = get_program_service()
        try:
            program = service.build_program()
        except DomainError as e:
            return error_response(e)

        data = ProgramSerializer(program).data
        cache.set(PROGRAM_CACHE_KEY, data, get_schedule_settings().cache_timeout)
        return Response(data)


class ItemCountsView(APIView):
    """Handler for GET /api/program/item-counts"""

    def get(self, request: Request) -> Response:
        category = request.query_params.get("category") or None
        if category is None:
            cached = cache.get(ITEM_COUNTS_CACHE_KEY)
            if cached is not None:
                return Response(cached)

        try:
            counts = get_program_service().item_counts(category)
        except DomainError as e:
            return error_response(e)

        data = {"itemCounts": ItemCountSerializer(counts, many=True).data}
        if category is None:
            cache.set(
                ITEM_COUNTS_CACHE_KEY, data, get_schedule_settings().cache_timeout
            )
        return Response(data)


class RegulationListView(APIView):
    """Handler for GET /api/regulations/{category}"""

    def get(self, request: Request, category: str) -> Response:
        try:
            regulations = get_program_service().regulations_for(category)
        except DomainError as e:
            return error_response(e)

        return Response(
            {
                "category": category,
                "items": ItemRegulationSerializer(regulations, many=True).data,
            }
        )
