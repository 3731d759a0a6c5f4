# Middleware package init
"""
Local Library Catalog — Middleware Package
=============================================

Middleware Chain (order matters!):
    Request → [Request ID] → [Access Logging] → [GZip] → Route Handler

    1. Request ID: generate (or accept) the correlation ID first
    2. Logging: log method, path, status and duration with that ID
"""
