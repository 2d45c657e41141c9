# Middleware package init
"""
Banknote Verifier Backend — Middleware Package
===============================================

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    1. Request ID first, so every log line of the request can carry it
    2. Logging measures status and duration once the handler returns
"""
