"""Core validation engine: models, rules and the rule registry."""
