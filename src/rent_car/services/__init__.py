"""
rent_car.services

Service-layer package.

Responsibilities:
- Sit between the HTTP handlers and storage.
- Bound every storage call with the configured deadline.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Services should be pure Python and easily testable with fake storages.
