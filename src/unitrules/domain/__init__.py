"""Domain layer: value kinds, predicates, rules, catalog, and validation.

This layer depends only on stdlib and pydantic.
It must never import from directives, services, config, or output.
"""
