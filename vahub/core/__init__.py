"""
Core module - configuration, logging and JWT auth.
"""
