"""
Cryptographic primitives used by the resolver.
"""
