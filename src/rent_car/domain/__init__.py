"""
rent_car.domain

Typed request/response models shared by the API, service and storage layers.
"""

# Package marker.
