"""Readiness check.

``GET /health`` answers 200 only when the store can actually serve the
API: the database accepts queries, no migration is pending and every
installed model has its table.  Later checks are skipped once the
database itself is unreachable.
"""

import time
from typing import Any, Callable, Dict, List

import structlog
from django.db import DEFAULT_DB_ALIAS, DatabaseError, connections
from django.db.migrations.executor import MigrationExecutor
from django.http import HttpRequest, JsonResponse
from django.utils import timezone

logger = structlog.get_logger(__name__)

Check = Callable[[], Dict[str, Any]]


def _check_database() -> Dict[str, Any]:
    conn = connections[DEFAULT_DB_ALIAS]
    conn.ensure_connection()
    with conn.cursor() as cursor:
        cursor.execute("SELECT 1")
        cursor.fetchone()
    return {"status": "up"}


def _pending_migrations() -> List[str]:
    executor = MigrationExecutor(connections[DEFAULT_DB_ALIAS])
    plan = executor.migration_plan(executor.loader.graph.leaf_nodes())
    return [f"{migration.app_label}.{migration.name}" for migration, _ in plan]


def _check_migrations() -> Dict[str, Any]:
    pending = _pending_migrations()
    if pending:
        return {"status": "pending", "pending": pending}
    return {"status": "up"}


def _missing_tables() -> List[str]:
    introspection = connections[DEFAULT_DB_ALIAS].introspection
    expected = set(introspection.django_table_names(only_existing=False))
    return sorted(expected - set(introspection.table_names()))


def _check_tables() -> Dict[str, Any]:
    missing = _missing_tables()
    if missing:
        return {"status": "missing", "missing": missing}
    return {"status": "up"}


def _run(name: str, check: Check) -> Dict[str, Any]:
    start = time.monotonic()
    try:
        result = check()
    except DatabaseError as exc:
        logger.error("health_check.failed", check=name, error=str(exc))
        return {"status": "down"}
    result["response_time_ms"] = round((time.monotonic() - start) * 1000, 2)
    return result


def health_check(request: HttpRequest) -> JsonResponse:
    services: Dict[str, Dict[str, Any]] = {"database": _run("database", _check_database)}
    if services["database"]["status"] == "up":
        services["migrations"] = _run("migrations", _check_migrations)
        services["tables"] = _run("tables", _check_tables)

    healthy = all(service["status"] == "up" for service in services.values())
    logger.info(
        "health_check.completed",
        status="healthy" if healthy else "unhealthy",
        degraded=[name for name, s in services.items() if s["status"] != "up"],
    )

    return JsonResponse(
        {
            "status": "healthy" if healthy else "unhealthy",
            "timestamp": timezone.now().isoformat(),
            "services": services,
        },
        status=200 if healthy else 503,
    )
