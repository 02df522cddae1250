"""
BookStore API — catalog of authors and their books over HTTP.

Application package root. This is a modular monolith using
hexagonal architecture (ports & adapters).

Bounded contexts:
    - catalog: Authors and books, with CRUD resource handlers.

Layers:
    - domain: Entities, ports (ABCs), error taxonomy.
    - application: Resource handlers orchestrating validation and persistence.
    - infrastructure: SQLAlchemy repositories and the logger adapter.
    - interfaces: FastAPI routers, Pydantic shapes, shape translator.
    - shared: Cross-cutting concerns (errors, security, logging).
"""
