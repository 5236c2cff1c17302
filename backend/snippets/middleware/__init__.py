# Middleware package init
"""
Snippets — Middleware Package
==============================

Middleware Chain:
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    Request ID runs first so the access log line and the exception
    handlers can include the ID.
"""
