"""
HTTP interface for the catalog bounded context.

Routers, Pydantic shapes and the translator between shapes and
domain records.
"""
