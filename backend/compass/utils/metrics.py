"""Prometheus metrics for AI provider calls."""

from prometheus_client import Counter, Histogram

provider_latency_ms = Histogram(
    "ai_provider_latency_ms",
    "AI provider call latency in milliseconds",
    ["provider", "operation", "outcome"],
    buckets=[50, 100, 250, 500, 1000, 2000, 4000, 8000, 15000, 30000],
)

provider_errors_total = Counter(
    "ai_provider_errors_total",
    "Total AI provider call failures",
    ["provider", "reason"],
)

degraded_responses_total = Counter(
    "ai_degraded_responses_total",
    "Total static degraded responses served",
    ["operation"],
)


class PrometheusProviderMetrics:
    """Prometheus-based provider metrics implementation."""

    def record_latency(self, provider: str, operation: str, outcome: str, latency_ms: float) -> None:
        """Record provider call latency."""
        provider_latency_ms.labels(provider=provider, operation=operation, outcome=outcome).observe(
            latency_ms
        )

    def inc_error(self, provider: str, reason: str) -> None:
        """Increment error counter."""
        provider_errors_total.labels(provider=provider, reason=reason).inc()

    def inc_degraded(self, operation: str) -> None:
        """Increment degraded-response counter."""
        degraded_responses_total.labels(operation=operation).inc()
