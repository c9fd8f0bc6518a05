"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

import logging

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from theater.conf import get_pricing_rules
from theater.domain.errors import DomainError
from theater.handlers.serializers import InvoiceSerializer, PlaySerializer, StatementSerializer
from theater.services import StatementService
from theater.services.rendering import render_plain_text
from theater.stores.django_store import DjangoPlayCatalog

logger = logging.getLogger(__name__)


def _domain_error_response(error: DomainError) -> Response:
    return Response(
        {"code": error.code.value, "message": error.message},
        status=status.HTTP_422_UNPROCESSABLE_ENTITY,
    )


class StatementView(APIView):
    """Handler for POST /api/statements"""

    def post(self, request: Request) -> Response:
        serializer = InvoiceSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        invoice = serializer.to_invoice()

        service = StatementService(DjangoPlayCatalog(), get_pricing_rules())
        try:
            statement = service.build_statement(invoice)
        except DomainError as exc:
            logger.warning("Statement for %s rejected: %s", invoice.customer, exc)
            return _domain_error_response(exc)

        body = StatementSerializer(statement).data
        body["text"] = render_plain_text(statement)
        return Response(body)


class PlayListView(APIView):
    """Handler for GET /api/plays"""

    def get(self, request: Request) -> Response:
        plays = DjangoPlayCatalog().list_plays()
        return Response(PlaySerializer(plays, many=True).data)
