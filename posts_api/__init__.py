"""
Posts API: CRUD HTTP service for blog posts.

Application package root. This is a small modular monolith using
hexagonal architecture (ports & adapters).

Bounded contexts:
    - posts: Create, read, search, update and delete posts.

Layers:
    - domain: Entities, business rules, ports (ABCs), errors.
    - application: Use cases, DTOs, orchestration.
    - infrastructure: Adapters (database, repositories) implementing domain ports.
    - interfaces: FastAPI routers, Pydantic schemas.
    - shared: Cross-cutting concerns (errors, logging).
"""
