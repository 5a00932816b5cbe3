"""Application layer: use-case orchestration over the store."""
