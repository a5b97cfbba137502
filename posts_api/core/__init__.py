"""
Core package: application settings.
"""
