"""
auth_service package

Core backend of the demo authentication service:

- FastAPI application and route wiring (`main.py`, `routes/`)
- SQLAlchemy user model and database integration (`models.py`, `db.py`)
- Credential validation (`validators.py`)
- User store gateway (`repository.py`, `users.py`)
- Signup / signin / password reset decisions (`service.py`)
- Token signing and password hashing (`auth.py`)
"""
