# Gunicorn configuration
# A single worker: each worker process would start its own refresh scheduler.
bind = "127.0.0.1:3001"
workers = 1
threads = 8
worker_class = "gthread"
timeout = 120
keepalive = 5
errorlog = "/var/log/leetboard/gunicorn-error.log"
accesslog = "/var/log/leetboard/gunicorn-access.log"
loglevel = "info"
wsgi_app = "wsgi:app"
