"""Infrastructure layer - storage adapters for the core ports."""
