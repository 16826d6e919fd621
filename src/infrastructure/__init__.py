"""Infrastructure layer: logging, resilience and adapters."""
