# Middleware package init
"""
LinkVault Backend — Middleware Package
========================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain:
    Request → [Request ID] → [Logging] → [GZip] → Route Handler

    1. Request ID: accept or generate a correlation ID
    2. Logging: one line per request with status and duration, tagged with
       the request ID
    3. GZip: compress larger responses (the UI's script and stylesheet)
"""
