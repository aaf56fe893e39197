"""Configuration loading for design documents and manufacturing rules.

Public API:
    - DesignConfiguration: Root design document model
    - BomRulesConfig: Root rules document model
    - load_design: Load a design document from a JSON file
    - load_design_from_dict: Validate an already parsed design document
    - ConfigError: Exception for design loading errors
    - config_to_design: Convert a design document to domain data
    - config_to_rules / rules_to_config: Convert rules to and from documents
    - modules_to_cabinet_units: Normalize loosely typed module lists
    - deep_merge: Recursive mapping merge
    - RuleStore: Persistent, cached rules
    - RulesError: Exception for invalid rule updates
"""

from casework.application.config.adapter import (
    config_to_design,
    config_to_rules,
    modules_to_cabinet_units,
    rules_to_config,
)
from casework.application.config.loader import (
    ConfigError,
    load_design,
    load_design_from_dict,
)
from casework.application.config.merger import deep_merge
from casework.application.config.rule_store import (
    DEFAULT_RULES_PATH,
    RuleStore,
    RulesError,
    merge_valid_rules,
    validate_rules,
)
from casework.application.config.schemas import (
    BomRulesConfig,
    DesignConfiguration,
    ModuleConfig,
)

__all__ = [
    "BomRulesConfig",
    "ConfigError",
    "DEFAULT_RULES_PATH",
    "DesignConfiguration",
    "ModuleConfig",
    "RuleStore",
    "RulesError",
    "config_to_design",
    "config_to_rules",
    "deep_merge",
    "load_design",
    "load_design_from_dict",
    "merge_valid_rules",
    "modules_to_cabinet_units",
    "rules_to_config",
    "validate_rules",
]
