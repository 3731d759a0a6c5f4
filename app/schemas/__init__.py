# Schemas package init
"""
Local Library Catalog — Schemas Package
==========================================

    - forms.py:        WTForms classes of the create/update pages
    - submissions.py:  sanitized values of a validated form
    - health.py:       GET /health response body
"""
