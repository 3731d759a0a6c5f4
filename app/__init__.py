"""
Local Library Catalog — Application Package
==============================================

A server-rendered catalog of authors, books, genres and book copies.

    ┌─────────────────────────────────────┐
    │   Routes (handlers + route table)   │  ← page flow, render / redirect
    ├─────────────────────────────────────┤
    │   Validation & form schemas         │  ← rule chains, sanitized forms
    ├─────────────────────────────────────┤
    │   Services                          │  ← queries and writes
    ├─────────────────────────────────────┤
    │   Models & projections              │  ← ORM tables, derived fields
    ├─────────────────────────────────────┤
    │   Database                          │  ← async engine, session factory
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
