"""
API package containing versioned routes and the error translation layer.

A version subpackage (``v1``) exposes a top‑level ``router`` which
includes all of its domain‑specific endpoints.  ``errors`` turns
service and validation failures into HTTP responses.
"""
