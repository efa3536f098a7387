"""
Gunicorn configuration for the GoalsManager API.

Run with:
    gunicorn -c deploy/gunicorn.conf.py goalsmanager.wsgi:app

Every setting can be overridden from the environment for container deployment.
"""

from __future__ import annotations

import logging
import multiprocessing
import os

# ===== Binding =====
bind = os.environ.get("GUNICORN_BIND", "0.0.0.0:8080")

# ===== Workers =====
# Threads share the SQLAlchemy engine pool; sqlite deployments should keep WORKERS=1.
worker_class = os.environ.get("GUNICORN_WORKER_CLASS", "gthread")
workers = int(os.environ.get("GUNICORN_WORKERS", str(min(multiprocessing.cpu_count() * 2 + 1, 8))))
threads = int(os.environ.get("GUNICORN_THREADS", "4"))
max_requests = int(os.environ.get("GUNICORN_MAX_REQUESTS", "5000"))
max_requests_jitter = int(os.environ.get("GUNICORN_MAX_REQUESTS_JITTER", "500"))

# ===== Timeouts =====
# Range listings generate missing tasks before returning, so allow some headroom.
timeout = int(os.environ.get("GUNICORN_TIMEOUT", "60"))
graceful_timeout = int(os.environ.get("GUNICORN_GRACEFUL_TIMEOUT", "30"))
keepalive = int(os.environ.get("GUNICORN_KEEPALIVE", "5"))

# ===== Logging =====
accesslog = os.environ.get("GUNICORN_ACCESSLOG", "-")
errorlog = os.environ.get("GUNICORN_ERRORLOG", "-")
loglevel = os.environ.get("GUNICORN_LOGLEVEL", os.environ.get("LOG_LEVEL", "info")).lower()
capture_output = True
access_log_format = os.environ.get(
    "GUNICORN_ACCESS_LOG_FORMAT",
    '{"timestamp": "%(t)s", "request": "%(r)s", "status": %(s)s, '
    '"bytes": %(b)s, "response_time_us": %(D)s}',
)

# ===== Limits =====
limit_request_line = int(os.environ.get("GUNICORN_LIMIT_REQUEST_LINE", "8190"))
forwarded_allow_ips = os.environ.get("GUNICORN_FORWARDED_ALLOW_IPS", "127.0.0.1")
preload_app = os.environ.get("GUNICORN_PRELOAD", "false").lower() in ("1", "true", "yes")

# ===== Metrics =====
statsd_host = os.environ.get("STATSD_HOST")
if statsd_host:
    statsd_prefix = os.environ.get("STATSD_PREFIX", "goalsmanager")

proc_name = os.environ.get("GUNICORN_PROC_NAME", "goalsmanager")


def when_ready(server):
    logging.getLogger(__name__).info(
        "GoalsManager listening on %s (workers=%s, threads=%s)", bind, workers, threads
    )


def worker_abort(worker):
    """Called when a worker timed out and is being replaced."""
    logging.getLogger(__name__).warning("Worker %s timed out after %ss", worker.pid, timeout)
