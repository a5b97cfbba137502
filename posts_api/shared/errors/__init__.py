"""
Shared error handling package.

Centralizes error-to-HTTP mapping so that domain and storage errors
are consistently translated into API responses.
"""
