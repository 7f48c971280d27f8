"""
Report models module.

Immutable report records produced by the report builders, with a
plain-record view for serialization by the caller.
"""
