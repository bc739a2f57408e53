"""
Pricing service: serves the current price of a vehicle.
"""
