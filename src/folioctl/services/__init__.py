"""Service layer — the query core and the operations built on it.

Pure engine modules (query, urlstate, related) depend only on the domain
layer. Service classes return ServiceResult and must never import from
commands or output; SiteService drives the page controllers.
"""
