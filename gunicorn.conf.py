"""
ClassMate Idea Hub - Gunicorn WSGI Server Configuration

Requests are short inserts and reads, so a small pool of threaded
workers is enough; every worker keeps its own database connection
(CONN_MAX_AGE in settings).
"""

import multiprocessing
import os
import logging

# =============================================================================
# ENVIRONMENT DETECTION
# =============================================================================

IS_PRODUCTION = os.getenv("PRODUCTION") == "true"

logging.basicConfig(
    level=logging.INFO if IS_PRODUCTION else logging.DEBUG,
    format='[%(asctime)s] %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

wsgi_app = "ideahub.wsgi:application"

# =============================================================================
# SERVER BINDING
# =============================================================================

PORT = int(os.getenv("PORT", 3000))
bind = [f"0.0.0.0:{PORT}"]


# =============================================================================
# WORKER CONFIGURATION
# =============================================================================

def calculate_workers():
    """Two workers per core plus one, capped for small hosts."""
    cpu_count = multiprocessing.cpu_count()
    return min((cpu_count * 2) + 1, 9)


workers = int(os.getenv("WEB_CONCURRENCY", calculate_workers()))
worker_class = "gthread"
threads = int(os.getenv("GUNICORN_THREADS", 2))

max_requests = int(os.getenv("GUNICORN_MAX_REQUESTS", 1000))
max_requests_jitter = int(os.getenv("GUNICORN_MAX_REQUESTS_JITTER", 100))


# =============================================================================
# TIMEOUT & RESOURCE LIMITS
# =============================================================================

timeout = 30
graceful_timeout = int(os.getenv("GUNICORN_GRACEFUL_TIMEOUT", 10))
keepalive = 5

limit_request_line = 8190
limit_request_fields = 100
limit_request_field_size = 8190


# =============================================================================
# PROXY & FORWARDING
# =============================================================================

forwarded_allow_ips = os.getenv("FORWARDED_ALLOW_IPS", "127.0.0.1")

if IS_PRODUCTION:
    secure_scheme_headers = {
        "X-FORWARDED-PROTO": "https",
    }


# =============================================================================
# LOGGING
# =============================================================================

accesslog = "-"
errorlog = "-"
loglevel = "info" if IS_PRODUCTION else "debug"
capture_output = True

access_log_format = (
    '%(h)s %(l)s %(u)s %(t)s "%(r)s" %(s)s %(b)s '
    '"%(f)s" "%(a)s" response_time=%(D)s_us request_id=%({x-request-id}o)s'
)

proc_name = "ideahub"


# =============================================================================
# STARTUP HOOKS
# =============================================================================

def when_ready(server):
    logger.info(f"Gunicorn ready at {server.address} with {workers} workers")
    logger.info("GET /health/ready/ to verify the database is reachable")


def post_fork(server, worker):
    """Open the database connection before the first request reaches this worker."""
    try:
        import django
        django.setup()
        from django.conf import settings
        from django.db import connections
        connections[settings.IDEAHUB_DATABASE].ensure_connection()
        logger.info(f"Worker {worker.pid}: database connection ready")
    except Exception as e:
        logger.warning(f"Worker {worker.pid}: failed to pre-warm DB connection: {e}")


def on_exit(server):
    logger.info("Gunicorn shutting down")
