"""
Views Package
=============

Server-side presentation for the HTML pages:
- rendering: the Jinja2 template environment
- forms:     SnippetCreateForm, which holds the create form's display state
- hero:      the Hero component used by the marketing pages

Templates live in snippets/templates and are autoescaped.
"""
