"""Prometheus metrics endpoint."""

from fastapi import APIRouter, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

router = APIRouter()


@router.get("/metrics")
async def metrics() -> Response:
    """Prometheus metrics endpoint.

    Exposes:
    - ai_provider_latency_ms{provider, operation, outcome}
    - ai_provider_errors_total{provider, reason}
    - ai_degraded_responses_total{operation}
    """
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
