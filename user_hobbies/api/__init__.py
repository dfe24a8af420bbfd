"""
API layer for the user hobbies backend.

Exposes the user and hobby CRUD endpoints (mounted at the application root).
"""
