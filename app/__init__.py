# =============================================================================
# Users API
# =============================================================================
# A small FastAPI service exposing CRUD over a single `users` table, guarded
# by a shared API key, with an optional numeric vector per user stored as
# JSON text.
#
# Package structure:
#   app/
#   ├── api/          → FastAPI routes, middleware, error rendering
#   ├── db/           → Async engine, session dependency, ORM model
#   ├── models/       → Pydantic V2 request/response schemas
#   └── services/     → One-statement datastore operations, vector codec
# =============================================================================
