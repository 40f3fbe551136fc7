"""
Orchestration Layer - Host Boundary

Exposes the three capabilities the query host calls: sync, query and search.
- Composes extract and transformation steps
- Turns failures into result bundles for the host
"""
