"""
Application layer for the posts bounded context.

Use cases validate input with the domain rules, call the
repository port and map entities to DTOs.
No framework or infrastructure imports allowed.
"""
