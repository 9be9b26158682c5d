"""
Infrastructure layer.

Implementations of the ports defined in the application layer:

- Persistence (SQLAlchemy repositories)
- Web framework (FastAPI routers and schemas)
- External services (AI generator, identity tokens, view invalidation)
- Dependency injection
"""
