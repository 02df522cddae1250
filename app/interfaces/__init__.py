"""
Interfaces layer package.

Contains FastAPI routers, Pydantic request/response shapes
and the translator between shapes and domain records.
No business logic belongs here.
"""
