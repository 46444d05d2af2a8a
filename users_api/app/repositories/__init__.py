"""
Persistence layer.

Repositories hide SQL from the service layer.  Each one owns the
queries for a single table and converts rows to and from schemas.
"""
