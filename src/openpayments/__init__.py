"""
Open Payments - ISO 20022 message types for Python.

Typed models for a catalog of ISO 20022 messages with schema facet
validation and XML Document encoding.
"""

__version__ = "0.1.0"
