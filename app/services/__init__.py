# =============================================================================
# Services Package — Datastore Operations
# =============================================================================
#   - users.py: list/create/get/update/delete, one statement each
#   - vectors.py: vec list <-> JSON text codec
# =============================================================================
