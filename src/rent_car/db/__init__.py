"""
rent_car.db

Persistence package (SQLAlchemy async).

Responsibilities:
- Provide the order ORM model, engine/session setup and the order storage.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# The service layer only sees the storage protocol in `services.storage`; swapping the
# backend means providing another implementation of that protocol.
