# Routes package init
"""
LinkVault Backend — API Routes Package
========================================

Route Inventory:
    - categories.py: GET/POST /api/categories, POST /api/categories/reorder,
                     PUT/DELETE /api/categories/{id}
    - bookmarks.py:  GET/POST /api/bookmarks, POST /api/bookmarks/reorder,
                     PUT/DELETE /api/bookmarks/{id}
    - auth.py:       GET /api/auth/check
    - pages.py:      GET / and the static file fallback
    - common.py:     body decoding, id parsing, store error translation

Routes stay thin: gate, decode, call a service, shape the response.
"""
