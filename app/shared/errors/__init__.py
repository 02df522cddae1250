"""
Shared error handling package.

Centralizes error-to-HTTP mapping so that catalog errors
are consistently translated into API responses.
"""
