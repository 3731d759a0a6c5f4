# Routes package init
"""
Local Library Catalog — Routes Package
=========================================

What:  HTTP handlers that accept requests and return pages or redirects.

Route Inventory:
    - catalog.py:         the ordered /catalog route table
    - books.py:           GET /catalog/ (home) and the book pages
    - authors.py:         author pages
    - genres.py:          genre pages
    - book_instances.py:  book copy pages
    - health.py:          GET /health (service health check)
    - responses.py:       render / redirect / 501 placeholder helpers

Design Principle:
    Handlers own the page flow (which reads, which template, which
    redirect); the services own the queries.
"""
