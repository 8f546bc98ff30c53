"""
rent_car.api

API package for the order service.

Responsibilities:
- FastAPI app factory, routers and dependency wiring.
- The uniform response envelope.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# The API layer stays thin: decoding + validation + delegation to services.
