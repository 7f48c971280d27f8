"""
Show data ingestion and normalization module.

Canonical show models, the normalizer that builds them from raw upstream
records, and the gateways that supply snapshots to the report engine.
"""
