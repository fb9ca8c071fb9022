# =============================================================================
# API Package — FastAPI Routes & Request Pipeline
# =============================================================================
#   - users.py: /users CRUD endpoints
#   - middleware.py: CORS, API key check, request logging / 500 mapping
#   - errors.py: `{"error": ...}` exception handlers
# =============================================================================
