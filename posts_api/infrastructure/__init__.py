"""
Infrastructure layer package.

Contains the database wrapper and the concrete adapters implementing
the ports defined in the domain layer.
"""
