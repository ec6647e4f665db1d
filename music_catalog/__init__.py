"""
Database models, migrations, and seeding for the music catalog app.

Runtime DB access lives in the app. This package is for repo-level DB operations:
- Artist/Album ORM models
- Alembic migrations config
- Demo catalog seed loader
"""
