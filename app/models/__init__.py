# =============================================================================
# Models Package — Pydantic V2 Schemas
# =============================================================================
# Request/response schemas for the API, SEPARATE from the database model
# (app/db/models.py): the table stores `vec` as JSON text, the API exposes
# it as a list.
# =============================================================================
