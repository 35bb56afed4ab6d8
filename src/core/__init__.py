"""
Core max-plus algebra: scalar sentinels, semiring operations, value objects
and payload contracts.

Nothing in this package depends on I/O beyond loading the bundled
JSON Schema contracts.
"""
