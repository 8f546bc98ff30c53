"""
rent_car.api.routers

HTTP routers: health probes and order endpoints.
"""
