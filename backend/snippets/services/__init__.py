# Services package init
"""
Snippets — Services Layer
==========================

Service Inventory:
    - SnippetStore:   the persistence operations on the `snippet` table
    - SnippetService: create / edit / delete mutations and their reads

Services can be unit-tested without HTTP; tests patch the module-level
`snippet_store` singleton to observe store calls.
"""
