# Routes package init
"""
Snippets — Routes Package
==========================

Route Inventory:
    - pages.py:      HTML pages and form posts (create / edit / delete)
    - api.py:        GET /api/snippets, GET /api/snippets/{id}
    - marketing.py:  GET /performance, GET /reliability (Hero pages)
    - health.py:     GET /health

Routes stay thin: read the request, call a service, shape the response.
"""
