"""
Gunicorn configuration for production deployment.

Usage:
    gunicorn -c gunicorn_config.py wsgi:app

Values set through GUNICORN_CMD_ARGS (see Dockerfile) or on the command
line take precedence over this file.
"""

import multiprocessing
import os

# Server socket
bind = f"0.0.0.0:{os.environ.get('PORT', '8000')}"
backlog = 2048

# Worker processes
workers = int(os.environ.get('WEB_CONCURRENCY', multiprocessing.cpu_count() * 2 + 1))
worker_class = "sync"
timeout = int(os.environ.get('GUNICORN_TIMEOUT', 120))
keepalive = 5

# Logging (stdout/stderr for container log collection)
accesslog = "-"
errorlog = "-"
loglevel = os.environ.get('LOG_LEVEL', 'info').lower()
access_log_format = '%(h)s %(l)s %(u)s %(t)s "%(r)s" %(s)s %(b)s "%(f)s" "%(a)s"'

# Process naming
proc_name = "propline"

# Server mechanics
daemon = False

# Server hooks
def when_ready(server):
    """Called just after the server is started."""
    server.log.info("propline listening on %s with %s worker(s)", ", ".join(server.cfg.bind), server.num_workers)

def post_fork(server, worker):
    """Called just after a worker has been forked."""
    server.log.info("Worker spawned (pid: %s)", worker.pid)
