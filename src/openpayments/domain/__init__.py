"""
Domain package - Base types for the ISO 20022 catalog.

This package contains the simple-type and composite-model bases, the schema
facet checks, the error types and the message registry. It has no knowledge
of any particular message and performs no I/O.
"""
