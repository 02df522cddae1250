"""
Security package: HTTP hardening middleware and rate limiting.
"""
