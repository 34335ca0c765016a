"""Core: settings, constants, exception handlers and application lifespan."""
