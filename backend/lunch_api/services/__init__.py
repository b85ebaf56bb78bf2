"""
Services module for business logic.

- domain/: Application services (menu resolution, orders, users, admin CRUD)
- permissions/: Strategy pattern for role-based access control
- base_service: Shared CRUD service base class
"""
