"""Connection handling for the echo server.

connections.py:
    Listener-level registry of admitted connections with an optional cap.

websocket/:
    Upgrade negotiation and the per-connection echo loop:
    - Origin policies (origins.py)
    - Connection Upgrader (upgrader.py)
    - Connection wrapper with scoped release (connection.py)
    - Echo Session state machine (session.py)
    - Optional idle watchdog (lifecycle.py)
    - Disconnect classification (disconnects.py)
    - Upgrade-path entry point (manager.py)
"""
