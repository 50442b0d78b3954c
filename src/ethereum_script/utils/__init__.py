"""
Utility functions used by the resolver.
"""
