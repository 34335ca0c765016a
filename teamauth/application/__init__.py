"""Application layer: DTOs, service ports and use-case services."""
