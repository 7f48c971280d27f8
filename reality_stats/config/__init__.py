"""
Configuration module.

Defaults, YAML overrides and validation for the reporting engine.
"""
