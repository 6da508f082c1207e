"""Observability - Structured logging and metrics"""

import inspect
import json
import logging
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from functools import wraps
from typing import Callable, Optional

from .db.config import settings


# ============ Structured Logging ============

class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging"""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if hasattr(record, "extra"):
            log_data.update(record.extra)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, ensure_ascii=False)


def setup_logging(level: str = "INFO", json_format: bool = True) -> logging.Logger:
    """
    Setup structured logging for the portal.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        json_format: Use JSON format for logs

    Returns:
        Configured logger
    """
    logger = logging.getLogger("portal")
    logger.setLevel(getattr(logging, level.upper()))

    logger.handlers.clear()

    handler = logging.StreamHandler()
    if json_format:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )

    logger.addHandler(handler)
    return logger


# Global logger
logger = setup_logging(settings.log_level, settings.log_json)


def log_with_context(**context):
    """Create a logger adapter that attaches extra context to every record"""
    class ContextAdapter(logging.LoggerAdapter):
        def process(self, msg, kwargs):
            kwargs.setdefault("extra", {})
            kwargs["extra"]["extra"] = {**self.extra, **kwargs["extra"].get("extra", {})}
            return msg, kwargs

    return ContextAdapter(logger, context)


# ============ Metrics ============

@dataclass
class Metrics:
    """In-memory metrics collector"""

    # Counters
    search_count: int = 0
    render_count: int = 0
    chat_count: int = 0
    lookup_miss_count: int = 0
    error_count: int = 0

    # Latency histograms (simplified as lists)
    search_latencies: list[float] = field(default_factory=list)
    render_latencies: list[float] = field(default_factory=list)

    # Gauges
    employees: int = 0
    events: int = 0
    work_events: int = 0
    tasks: int = 0

    def increment(self, name: str, value: int = 1) -> None:
        """Increment a counter"""
        if hasattr(self, name):
            setattr(self, name, getattr(self, name) + value)

    def record_latency(self, name: str, latency_ms: float) -> None:
        """Record a latency measurement"""
        latency_list = getattr(self, f"{name}_latencies", None)
        if latency_list is not None:
            latency_list.append(latency_ms)
            # Keep last 1000 measurements
            if len(latency_list) > 1000:
                latency_list.pop(0)

    def set_gauge(self, name: str, value: int) -> None:
        """Set a gauge value"""
        if hasattr(self, name):
            setattr(self, name, value)

    def get_percentile(self, name: str, percentile: float) -> Optional[float]:
        """Get percentile from latency histogram"""
        latencies = getattr(self, f"{name}_latencies", [])
        if not latencies:
            return None
        sorted_latencies = sorted(latencies)
        idx = int(len(sorted_latencies) * percentile / 100)
        return sorted_latencies[min(idx, len(sorted_latencies) - 1)]

    def to_dict(self) -> dict:
        """Export metrics as dictionary"""
        return {
            "counters": {
                "search_count": self.search_count,
                "render_count": self.render_count,
                "chat_count": self.chat_count,
                "lookup_miss_count": self.lookup_miss_count,
                "error_count": self.error_count,
            },
            "latencies": {
                "search_p50": self.get_percentile("search", 50),
                "search_p95": self.get_percentile("search", 95),
                "render_p50": self.get_percentile("render", 50),
                "render_p95": self.get_percentile("render", 95),
            },
            "gauges": {
                "employees": self.employees,
                "events": self.events,
                "work_events": self.work_events,
                "tasks": self.tasks,
            },
        }

    def reset(self) -> None:
        """Reset counters and latencies (gauges are refreshed by health checks)"""
        self.search_count = 0
        self.render_count = 0
        self.chat_count = 0
        self.lookup_miss_count = 0
        self.error_count = 0
        self.search_latencies.clear()
        self.render_latencies.clear()


# Global metrics instance
metrics = Metrics()


# ============ Decorators ============

def track_latency(operation: str):
    """Decorator to track operation latency and count calls"""
    def decorator(func: Callable):
        @wraps(func)
        async def async_wrapper(*args, **kwargs):
            start = time.perf_counter()
            try:
                return await func(*args, **kwargs)
            finally:
                elapsed_ms = (time.perf_counter() - start) * 1000
                metrics.record_latency(operation, elapsed_ms)
                metrics.increment(f"{operation}_count")

        @wraps(func)
        def sync_wrapper(*args, **kwargs):
            start = time.perf_counter()
            try:
                return func(*args, **kwargs)
            finally:
                elapsed_ms = (time.perf_counter() - start) * 1000
                metrics.record_latency(operation, elapsed_ms)
                metrics.increment(f"{operation}_count")

        if inspect.iscoroutinefunction(func):
            return async_wrapper
        return sync_wrapper

    return decorator


def track_errors(func: Callable):
    """Decorator to count and log errors before re-raising"""
    @wraps(func)
    async def async_wrapper(*args, **kwargs):
        try:
            return await func(*args, **kwargs)
        except Exception as e:
            metrics.increment("error_count")
            logger.error(f"Error in {func.__name__}: {e}", exc_info=True)
            raise

    @wraps(func)
    def sync_wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except Exception as e:
            metrics.increment("error_count")
            logger.error(f"Error in {func.__name__}: {e}", exc_info=True)
            raise

    if inspect.iscoroutinefunction(func):
        return async_wrapper
    return sync_wrapper


# ============ Health Check ============

async def get_health_status(uow) -> dict:
    """
    Get comprehensive health status.

    Args:
        uow: Unit of work

    Returns:
        Health status dict
    """
    status = {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "checks": {},
    }

    try:
        counts = {
            "employees": len(await uow.employees.list()),
            "events": len(await uow.events.list()),
            "work_events": len(await uow.work_events.list()),
            "tasks": len(await uow.tasks.list()),
        }
        for name, value in counts.items():
            metrics.set_gauge(name, value)

        status["checks"]["store"] = {"status": "ok"}
        status["checks"]["data"] = {"status": "ok", **counts}
    except Exception as e:
        status["checks"]["store"] = {"status": "error", "message": str(e)}
        status["checks"]["data"] = {"status": "error", "message": str(e)}
        status["status"] = "unhealthy"

    return status
