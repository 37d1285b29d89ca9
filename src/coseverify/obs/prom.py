"""Prometheus instrumentation for signature verification.

Labels stay low-cardinality: algorithm name and a fixed result/reason set.
"""
from __future__ import annotations

from typing import Tuple

from prometheus_client import (
    CollectorRegistry,
    Counter,
    generate_latest,
    CONTENT_TYPE_LATEST,
)

from ..config import METRICS_ENABLED

REGISTRY = CollectorRegistry()

VERIFICATIONS = Counter(
    "coseverify_verifications_total",
    "Signature verifications by algorithm and outcome (valid|invalid|fault).",
    ["alg", "result"],
    registry=REGISTRY,
)
REJECTIONS = Counter(
    "coseverify_rejections_total",
    "Verifier constructions rejected (unsupported_algorithm|incompatible_key).",
    ["reason"],
    registry=REGISTRY,
)


def observe_verification(alg: str, result: str) -> None:
    if not METRICS_ENABLED:
        return
    VERIFICATIONS.labels(alg=alg, result=result).inc()


def observe_rejection(reason: str) -> None:
    if not METRICS_ENABLED:
        return
    REJECTIONS.labels(reason=reason).inc()


def export_metrics() -> Tuple[bytes, str]:
    return generate_latest(REGISTRY), CONTENT_TYPE_LATEST


__all__ = ["REGISTRY", "observe_verification", "observe_rejection", "export_metrics"]
