"""
Validation engine, operation dispatch and rule configuration management.
"""

from .operations import EngineOperation, attached_engine, instant_validate
from .rule_config import RuleConfigBuilder, RuleConfigLoader
from .rule_engine import ValidationEngine

__all__ = [
    "ValidationEngine",
    "EngineOperation",
    "instant_validate",
    "attached_engine",
    "RuleConfigLoader",
    "RuleConfigBuilder",
]
