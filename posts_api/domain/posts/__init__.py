"""
Posts bounded context: domain layer.

Holds the Post entity, the field and id rules applied before any
storage access, the typed error hierarchy and the repository port.
"""
