import os

# Provider fan-out blocks a request thread on upstream I/O, so use threaded workers.
worker_class = "gthread"
workers = 2  # tune via load tests
threads = 8
bind = f"0.0.0.0:{os.environ.get('PORT', '8080')}"
timeout = 30
graceful_timeout = 30
keepalive = 5
forwarded_allow_ips = "10.0.0.0/8,127.0.0.1"

accesslog = "-"
loglevel = os.environ.get("LOG_LEVEL", "info").lower()

# hygiene
max_requests = 2000
max_requests_jitter = 200

# security limits
limit_request_fields = 100
limit_request_field_size = 8190   # adjust prudently
# limit_request_line = 4094       # enable when needed
