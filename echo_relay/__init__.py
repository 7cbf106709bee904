"""Echo Relay: a WebSocket echo server.

Accepts an HTTP upgrade to WebSocket and writes every received message back
to the same peer with its original type (text or binary) and payload, one
independent session per connection, until either side closes.

Architecture Overview:
    - server.py: FastAPI app factory and route table
    - cli.py: listener startup (socket bind + uvicorn)
    - config/: environment-based configuration
    - handlers/: connection registry, upgrader, echo session
    - messages/: message value type
    - errors/: error taxonomy
    - logging/: logging setup and per-connection context fields

Example:
    $ python -m echo_relay --port 8080

Environment Variables:
    - SERVER_HOST / SERVER_PORT: listening address (default 0.0.0.0:8080)
    - WS_ALLOWED_ORIGINS: "*" (default), "same-origin", or a comma list
    - WS_IDLE_TIMEOUT_S: close idle connections after N seconds (0 = never)
    - MAX_CONCURRENT_CONNECTIONS: admission cap (0 = unlimited)
    - APP_LOG_LEVEL: logging level (default INFO)
"""

__version__ = "0.1.0"
