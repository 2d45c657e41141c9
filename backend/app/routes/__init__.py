# Routes package init
"""
Banknote Verifier Backend — API Routes Package
===============================================

Route Inventory:
    - countries.py: GET  /api/countries
                    GET  /api/countries/{code}/denominations
    - verify.py:    POST /api/verify
    - stats.py:     GET  /api/stats
    - health.py:    GET  /health

Routes stay thin: extract the request, call a service, set headers.
Status codes for failures come from the exception handlers in main.py.
"""
