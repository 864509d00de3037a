# resumehub/core/__init__.py
"""
Core application modules.
Contains essential infrastructure components:
- bootstrap: Service wiring and startup maintenance (orphan sweep)
- db: Database configuration and connection management
- errors: Error taxonomy shared by the service and the API layer
- security: Password hashing and optional signed access tokens
"""
