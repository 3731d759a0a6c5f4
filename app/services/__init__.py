# Services package init
"""
Local Library Catalog — Services Layer
=========================================

Service Inventory:
    - AuthorService:        authors (list, get, count, create, delete)
    - BookService:          books and their genre links (list, get, dependents,
                            count, create, update)
    - GenreService:         genres (list, get, case-insensitive lookup, count, create)
    - BookInstanceService:  physical copies (list, get, per book, count, create)

Every method takes the session factory and opens its own session, so the
handlers can await independent reads together.
"""
