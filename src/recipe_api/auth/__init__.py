"""
recipe_api.auth

Authentication/authorization package.

Responsibilities:
- JWT helpers and validation.
- Static role registry and the per-operation right table.
- Authorization guard and FastAPI auth dependencies.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Only `deps` imports FastAPI; the registry, policy and guard are plain Python.
