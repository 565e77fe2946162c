"""Real-time terminal charts of Docker container statistics."""

__version__ = "0.2.0"
__all__ = ["app", "cli", "data", "display", "error", "escape", "utils"]