"""
Catalog bounded context — domain layer.

Authors and the books they wrote:
- Entities (Author, Book)
- Error taxonomy mapped to HTTP at the interface layer
- Ports for persistence and logging
"""
