"""
Ethereum Script Resolver
^^^^^^^^^^^^^^^^^^^^^^^^
Scripts written against a simulated EVM describe deployments and calls that
are later broadcast to a real network. Before anything can be broadcast, the
intent captured during simulation has to be turned into a concrete
transaction: who sends it, with which nonce, to which address and with which
calldata.

This package resolves contract creations (plain `CREATE` and deterministic
`CREATE2` through the well-known deployment proxy), projects observed
transactions into the environment consumed by the virtual machine, and
provides the small set of journal and key helpers both of those rely on.
"""

__version__ = "0.1.0"
