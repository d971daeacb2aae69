"""
Infrastructure package - Wire formats for catalog models.
"""
