"""Gunicorn config for container deployment (gunicorn -c gunicorn.conf.py alumni.main:app)."""
import os

bind = f"0.0.0.0:{os.environ.get('PORT', '8000')}"

# Uvicorn async workers: each fetches and holds its own copy of the
# directory, so /api/reload only refreshes the worker that served it.
# Keep a single worker unless WEB_CONCURRENCY says otherwise.
worker_class = "uvicorn.workers.UvicornWorker"
workers = int(os.environ.get("WEB_CONCURRENCY", "1"))

# Startup fetches the sheet before the worker accepts requests
timeout = 60

graceful_timeout = 30

# Must exceed the proxy keep-alive (commonly 60s)
keepalive = 65

# Logging
accesslog = "-"
errorlog = "-"
loglevel = os.environ.get("LOG_LEVEL", "info").lower()
