"""Status server: welcome page and GET /status cache round-trip."""

from britto.status_server.probe import STATUS_KEY, probe

__all__ = ["STATUS_KEY", "probe"]
