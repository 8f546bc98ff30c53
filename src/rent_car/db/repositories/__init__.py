"""
rent_car.db.repositories

Storage implementations backed by SQLAlchemy.
"""

# Package marker; storages are imported directly from submodules.
