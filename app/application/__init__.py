"""
Application layer package.

Contains the resource handlers that orchestrate domain ports.
Each handler owns the operations of one entity type.
This layer depends on domain ports, never on infrastructure.
"""
