"""Metrics endpoint router composition for instantaneous process figures."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from hotstar_web.domain import ProcessStatsPort, runtime_build_metrics_snapshot


def api_create_metrics_router(process_stats: ProcessStatsPort) -> APIRouter:
    """Create metrics router exposing memory, uptime and CPU figures.

    Args:
        process_stats: Process statistics accessor.

    Returns:
        APIRouter: Router exposing `/metrics` endpoint.

    Raises:
        ValueError: Raised when process_stats is invalid.
    """

    if process_stats is None:
        raise ValueError("process_stats must not be None")

    router = APIRouter(tags=["metrics"])

    @router.api_route("/metrics", methods=["GET", "HEAD"])
    def api_metrics_snapshot() -> JSONResponse:
        """Return one metrics snapshot; nothing is aggregated or retained."""

        snapshot = runtime_build_metrics_snapshot(process_stats=process_stats)
        return JSONResponse(content=snapshot.to_payload(), status_code=status.HTTP_200_OK)

    return router
