"""
Infrastructure layer package.

Adapters implementing domain ports against real systems:
the relational database (SQLAlchemy) and the logging stack.
"""
