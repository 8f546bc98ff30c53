"""
rent_car.observability

Structured logging setup and request-scoped log context.
"""

# Package marker.
