"""
auth — User authentication module.

Provides:
  • JWT access token creation & verification (PyJWT, HS256)
  • Password hashing (bcrypt)
  • Register / Login API routes
  • ``get_current_user`` FastAPI dependency
"""
