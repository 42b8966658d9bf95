"""
recipe_api.api

API package for the Recipe API service.

Responsibilities:
- FastAPI app factory and router modules.
- API-layer dependency wiring, request/response models and error mapping.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# The API layer should remain thin: request validation + auth + delegation to services.
