"""
Core codecs, errors, locale gateway and contracts.

Everything here is side-effect free: no I/O beyond reading bundled
JSON schemas, no shared mutable state between calls.
"""
