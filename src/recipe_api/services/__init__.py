"""
recipe_api.services

Service-layer package.

Responsibilities:
- Own existence checks, merge rules and transaction boundaries.
- Raise `recipe_api.errors` types; never translate them to HTTP.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Services take an AsyncSession and are testable without FastAPI.
