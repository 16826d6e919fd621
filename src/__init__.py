"""Compute core - template resolution and status convergence for cloud compute services.

Picks a concrete (image, hardware, location) triple out of a provider
catalog from declarative selection criteria, and polls nodes, images and
TCP ports until they reach an intended state.

Key Components:
    - domain: Locations, images, hardware, nodes, selection criteria and
      the template resolver
    - infrastructure: Logging, bounded retry and convergence polling
    - application: Node lifecycle use cases
    - config: Pydantic configuration schemas and the configuration manager

Usage:
    >>> from domain.template import SelectionCriteria, TemplateResolver
    >>> resolver = TemplateResolver.from_catalog(catalog, fallback_template)
    >>> template = resolver.resolve(SelectionCriteria.from_spec("osFamily=UBUNTU,minRam=2048"))
"""
