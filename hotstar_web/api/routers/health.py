"""Health endpoint router composition for process liveness checks."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from hotstar_web.config import AppSettings
from hotstar_web.domain import ProcessStatsPort, runtime_build_health_snapshot


def api_create_health_router(settings: AppSettings, process_stats: ProcessStatsPort) -> APIRouter:
    """Create health-check router reporting process liveness.

    Args:
        settings: Runtime settings providing environment and version labels.
        process_stats: Process statistics accessor used for uptime.

    Returns:
        APIRouter: Router exposing `/health` endpoint.

    Raises:
        ValueError: Raised when dependencies are invalid.
    """

    if settings is None:
        raise ValueError("settings must not be None")
    if process_stats is None:
        raise ValueError("process_stats must not be None")

    router = APIRouter(tags=["health"])

    @router.api_route("/health", methods=["GET", "HEAD"])
    def api_health_status() -> JSONResponse:
        """Return a freshly computed liveness snapshot.

        No downstream dependency is checked; the endpoint reports only that
        the process is alive and serving.

        Returns:
            JSONResponse: Liveness payload with HTTP 200.
        """

        snapshot = runtime_build_health_snapshot(
            process_stats=process_stats,
            environment=settings.environment_name,
            version=settings.app_version,
        )
        return JSONResponse(content=snapshot.to_payload(), status_code=status.HTTP_200_OK)

    return router
