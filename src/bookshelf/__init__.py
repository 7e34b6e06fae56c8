"""Bookshelf: a small CRUD HTTP service for books.

The package is laid out by concern:
- runtime: configuration loading and the application context
- core: infrastructure services such as the database session factory
- entities: domain models, persistence tables and repositories
- api: the FastAPI application, dependencies and routers
"""

__version__ = "0.1.0"
