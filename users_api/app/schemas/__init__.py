"""
Pydantic schema definitions for API payloads.

Schemas are separated from the persistence layer to decouple the API
representation from storage.  All payloads use camelCase keys on the
wire (``firstName``, ``birthDate``) and snake_case attributes in Python.
"""
