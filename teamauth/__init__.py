"""teamauth: team permission gate and event-driven communications."""

__version__ = "1.0.0"
