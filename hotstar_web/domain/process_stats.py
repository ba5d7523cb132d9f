"""Read-on-demand accessors over the host process introspection facilities."""

from __future__ import annotations

import os
import resource
import sys
import time
from datetime import datetime, timezone
from typing import Callable, Protocol

from .models import HealthSnapshot, MetricsSnapshot

_STATM_PATH = "/proc/self/statm"
_PROC_STAT_PATH = "/proc/self/stat"
_PROC_UPTIME_PATH = "/proc/uptime"
# Index of `starttime` once the fields after the command name are split.
_STARTTIME_FIELD_INDEX = 19


class ProcessStatsPort(Protocol):
    """Port definition for process-level runtime figures."""

    def runtime_uptime_seconds(self) -> float:
        """Return seconds elapsed since the process started."""

    def runtime_memory_usage(self) -> dict[str, int]:
        """Return memory figures in bytes."""

    def runtime_cpu_usage(self) -> dict[str, int]:
        """Return user and system CPU time in microseconds."""


class ProcessStatsProvider(ProcessStatsPort):
    """Process statistics backed by `resource`, `/proc` and a monotonic clock.

    The provider keeps no counters; every accessor reads the operating system
    at call time.
    """

    def __init__(self, clock: Callable[[], float] | None = None):
        """Initialize provider and capture the uptime reference instant.

        Without an injected clock, uptime counts from process start as reported
        by `/proc`, falling back to construction time where `/proc` is absent.
        An injected clock always counts from construction.

        Args:
            clock: Optional monotonic clock returning seconds.

        Raises:
            ValueError: Raised when clock is not callable.
        """

        if clock is not None and not callable(clock):
            raise ValueError("clock must be callable")
        self._clock = clock or time.monotonic
        self._started_at = self._clock()
        if clock is None:
            process_age_seconds = _runtime_process_age_seconds()
            if process_age_seconds is not None:
                self._started_at -= process_age_seconds

    def runtime_uptime_seconds(self) -> float:
        """Return non-negative seconds since the process started.

        Returns:
            float: Uptime in seconds.
        """

        return max(0.0, self._clock() - self._started_at)

    def runtime_memory_usage(self) -> dict[str, int]:
        """Return current and peak resident set size in bytes.

        Returns:
            dict[str, int]: `rss` and `max_rss` byte counts.

        Raises:
            OSError: Raised when resource usage cannot be read.
        """

        max_rss_bytes = self._runtime_max_rss_bytes()
        rss_bytes = self._runtime_current_rss_bytes()
        if rss_bytes is None:
            rss_bytes = max_rss_bytes
        return {"rss": rss_bytes, "max_rss": max_rss_bytes}

    def runtime_cpu_usage(self) -> dict[str, int]:
        """Return user and system CPU time consumed by this process.

        Returns:
            dict[str, int]: `user` and `system` figures in microseconds.
        """

        usage = resource.getrusage(resource.RUSAGE_SELF)
        return {
            "user": int(usage.ru_utime * 1_000_000),
            "system": int(usage.ru_stime * 1_000_000),
        }

    def _runtime_max_rss_bytes(self) -> int:
        # ru_maxrss is kilobytes on Linux and bytes on macOS.
        max_rss = int(resource.getrusage(resource.RUSAGE_SELF).ru_maxrss)
        if sys.platform == "darwin":
            return max_rss
        return max_rss * 1024

    def _runtime_current_rss_bytes(self) -> int | None:
        try:
            with open(_STATM_PATH, encoding="ascii") as statm_file:
                fields = statm_file.read().split()
        except OSError:
            return None
        if len(fields) < 2:
            return None
        return int(fields[1]) * os.sysconf("SC_PAGE_SIZE")


def runtime_build_health_snapshot(
    process_stats: ProcessStatsPort,
    environment: str,
    version: str,
) -> HealthSnapshot:
    """Build one liveness snapshot from current process state.

    Args:
        process_stats: Process statistics accessor.
        environment: Deployment environment label.
        version: Application version label.

    Returns:
        HealthSnapshot: Fresh snapshot with a UTC ISO-8601 timestamp.
    """

    return HealthSnapshot(
        status="healthy",
        timestamp=datetime.now(timezone.utc).isoformat(),
        uptime=process_stats.runtime_uptime_seconds(),
        environment=environment,
        version=version,
    )


def runtime_build_metrics_snapshot(process_stats: ProcessStatsPort) -> MetricsSnapshot:
    """Build one instantaneous metrics snapshot.

    Args:
        process_stats: Process statistics accessor.

    Returns:
        MetricsSnapshot: Memory, uptime and CPU figures.
    """

    return MetricsSnapshot(
        memory=process_stats.runtime_memory_usage(),
        uptime=process_stats.runtime_uptime_seconds(),
        cpu=process_stats.runtime_cpu_usage(),
    )


def _runtime_process_age_seconds() -> float | None:
    """Return how long ago this process started, or None without `/proc`.

    Returns:
        float | None: Process age in seconds.
    """

    try:
        with open(_PROC_STAT_PATH, encoding="ascii", errors="replace") as stat_file:
            stat_text = stat_file.read()
        with open(_PROC_UPTIME_PATH, encoding="ascii") as uptime_file:
            system_uptime_seconds = float(uptime_file.read().split()[0])
        # The command name may contain spaces; fields resume after its closing parenthesis.
        fields = stat_text[stat_text.rindex(")") + 2 :].split()
        start_ticks = int(fields[_STARTTIME_FIELD_INDEX])
        ticks_per_second = os.sysconf("SC_CLK_TCK")
    except (OSError, ValueError, IndexError):
        return None
    return max(0.0, system_uptime_seconds - start_ticks / ticks_per_second)
