"""Application layer: ports, use cases and query orchestration."""
