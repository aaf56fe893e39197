"""Persistent store for manufacturing rules.

The rules document is a JSON file holding any subset of the rules tree. It
is merged over the built-in defaults, validated and cached per store.
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from casework.application.config.adapter import config_to_rules
from casework.application.config.loader import extract_validation_errors, format_validation_message
from casework.application.config.merger import deep_merge
from casework.application.config.schemas import BomRulesConfig
from casework.domain.rules import DEFAULT_BOM_RULES, RULE_SECTIONS, BomRules

logger = logging.getLogger(__name__)

DEFAULT_RULES_PATH = Path("config") / "bom-rules.json"


class RulesError(ValueError):
    """Raised for unknown rule sections or invalid rule values.

    Attributes:
        details: One entry per validation failure with path and message.
    """

    def __init__(self, message: str, details: list[dict[str, Any]] | None = None) -> None:
        self.details = details or []
        super().__init__(message)


def _drop_path(document: dict[str, Any], loc: tuple[Any, ...]) -> bool:
    """Remove the key at ``loc`` from a nested document; False if absent."""
    node: Any = document
    for key in loc[:-1]:
        if not isinstance(node, dict) or key not in node:
            return False
        node = node[key]
    if not loc or not isinstance(node, dict) or loc[-1] not in node:
        return False
    del node[loc[-1]]
    return True


def validate_rules(data: dict[str, Any]) -> BomRules:
    """Validate a complete rules tree and convert it to domain rules.

    Raises:
        RulesError: If any value is out of range or a key is unknown.
    """
    try:
        return config_to_rules(BomRulesConfig.model_validate(data))
    except PydanticValidationError as e:
        details = extract_validation_errors(e)
        raise RulesError(
            format_validation_message(details, "Rules validation failed:"), details
        ) from e


def merge_valid_rules(document: dict[str, Any]) -> BomRules:
    """Merge a stored rules document over the defaults, skipping bad keys.

    Keys the schema rejects (unknown names, out-of-range values, wrong
    types) are removed from the document and logged; the remaining
    overrides still apply.

    Raises:
        RulesError: If a failure cannot be traced to a key in the document.
    """
    remaining = deep_merge({}, document)
    while True:
        try:
            return config_to_rules(
                BomRulesConfig.model_validate(deep_merge(DEFAULT_BOM_RULES.to_dict(), remaining))
            )
        except PydanticValidationError as e:
            details = extract_validation_errors(e)
            dropped = [
                detail["path"]
                for err, detail in zip(e.errors(), details)
                if _drop_path(remaining, tuple(err["loc"]))
            ]
            if not dropped:
                raise RulesError(
                    format_validation_message(details, "Rules validation failed:"), details
                ) from e
            logger.warning(f"Ignoring invalid rules keys: {', '.join(dropped)}")


class RuleStore:
    """Loads, caches and persists the rules tree.

    Example:
        >>> store = RuleStore(Path("config/bom-rules.json"))
        >>> store.get().construction.door_gap
        4.0
    """

    def __init__(self, path: Path | str | None = None) -> None:
        self._path = Path(path) if path is not None else DEFAULT_RULES_PATH
        self._cached: BomRules | None = None

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> BomRules:
        """Read the document and merge it over the defaults.

        Invalid keys are dropped with a warning and the valid overrides
        kept. A document that cannot be read or parsed is logged and the
        built-in defaults are cached instead.
        """
        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
            if not isinstance(raw, dict):
                raise RulesError("Rules document must be a JSON object")
            rules = merge_valid_rules(raw)
        except (OSError, ValueError) as e:
            logger.warning(f"Failed to load rules from {self._path}, using defaults: {e}")
            rules = DEFAULT_BOM_RULES
        else:
            logger.info(f"Rules loaded from {self._path}")
        self._cached = rules
        return rules

    def get(self) -> BomRules:
        if self._cached is None:
            return self.load()
        return self._cached

    def reload(self) -> BomRules:
        return self.load()

    def clear_cache(self) -> None:
        self._cached = None

    def save(self, rules: BomRules) -> None:
        """Write the full rules tree and refresh the cache."""
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(
            json.dumps(rules.to_dict(), indent=2, ensure_ascii=False) + "\n",
            encoding="utf-8",
        )
        self._cached = rules
        logger.info(f"Rules saved to {self._path}")

    def reset(self) -> BomRules:
        """Persist and return the built-in defaults."""
        self.save(DEFAULT_BOM_RULES)
        return DEFAULT_BOM_RULES

    def get_section(self, name: str) -> dict[str, Any]:
        """Return one top-level section of the current rules as a dict."""
        if name not in RULE_SECTIONS:
            raise RulesError(f"Unknown rules section: {name}")
        return self.get().to_dict()[name]

    def update(self, updates: dict[str, Any], section: str | None = None) -> BomRules:
        """Deep-merge ``updates`` into the current rules, validate and save.

        Args:
            updates: Partial rules tree, or partial section when ``section``
                is given.
            section: Optional top-level section the updates apply to.

        Raises:
            RulesError: For unknown sections or invalid values. Nothing is
                written in that case.
        """
        if section is not None:
            if section not in RULE_SECTIONS:
                raise RulesError(f"Unknown rules section: {section}")
            updates = {section: updates}
        else:
            unknown = sorted(set(updates) - set(RULE_SECTIONS))
            if unknown:
                raise RulesError(f"Unknown rules section: {', '.join(unknown)}")

        rules = validate_rules(deep_merge(self.get().to_dict(), updates))
        self.save(rules)
        return rules
