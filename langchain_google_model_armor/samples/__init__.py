"""Runnable samples for Model Armor template management and sanitization.

Each module exposes one function taking the project, location and template
IDs, printing what it did and returning the API response.
"""
