"""
Gunicorn settings: ``gunicorn -c gunicorn.conf.py wsgi:app``

Threaded workers keep the site answering while a contact form send is
waiting on the SMTP relay; a sync worker would serialize every request
behind it.
"""

import os

bind = f"0.0.0.0:{os.environ.get('PORT', '3657')}"
workers = int(os.environ.get('GUNICORN_WORKERS', '2'))
worker_class = "gthread"
threads = int(os.environ.get('GUNICORN_THREADS', '8'))
max_requests = 1000
max_requests_jitter = 100
timeout = 120
keepalive = 5

# Logging
accesslog = "-"
errorlog = "-"
loglevel = "info"
access_log_format = '%(h)s %(l)s %(u)s %(t)s "%(r)s" %(s)s %(b)s "%(f)s" "%(a)s" %(D)s'

# Process naming
proc_name = "portfolio-site"


# Server hooks
def on_starting(server):
    """Called just before the master process is initialized."""
    server.log.info("Starting Gunicorn server")


def when_ready(server):
    """Called just after the server is started."""
    server.log.info(f"Listening on {server.address}")


def worker_abort(worker):
    """Called when a worker receives the SIGABRT signal."""
    worker.log.info("Worker received SIGABRT signal")
