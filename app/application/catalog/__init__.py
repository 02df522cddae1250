"""
Application layer for the catalog bounded context.

Resource handlers coordinate validation, persistence ports and logging
for one entity type each. No framework or infrastructure imports allowed.
"""
