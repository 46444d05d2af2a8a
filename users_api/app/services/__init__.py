"""
Service layer abstraction.

Each service encapsulates the business rules for a domain and talks to
storage only through a repository, so API handlers never touch SQL.
"""
