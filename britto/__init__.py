"""britto: JVM server launcher and cache status server."""

__version__ = "0.1.0"
