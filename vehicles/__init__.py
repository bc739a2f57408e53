"""
Vehicles API: CRUD service for car records.
"""
