"""
API routers grouped by area: public, auth, users, menu, orders, admin.
"""
