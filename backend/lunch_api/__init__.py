"""
Lunch ordering REST API.

- models/: SQLAlchemy ORM models
- repositories/: Data access with eager loading
- services/: Business logic and the access policy
- routers/: FastAPI endpoints
- core/: Lifespan, CORS and middlewares
"""
