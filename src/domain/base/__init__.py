"""Base domain building blocks: entities, value objects, exceptions and ports."""
