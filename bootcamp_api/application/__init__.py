"""Application layer: DTOs, use cases and query services."""
