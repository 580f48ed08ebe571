# Services package init
"""
LinkVault Backend — Services Layer
====================================

What:  The store: every read and write against the categories and bookmarks
       tables, with the ordering and cascade rules.

Service Inventory:
    - ordering: append-at-end and reorder helpers shared by both tables
    - CategoryService: list, create, rename, cascading delete, reorder
    - BookmarkService: filtered/redacted list, create, update, delete, reorder

Services take the request's AsyncSession as an argument and hold no state,
so one module-level instance of each is shared by all requests.
"""
