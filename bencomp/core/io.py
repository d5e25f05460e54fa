"""Benchmark input acquisition and configuration persistence."""

import hashlib
import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, Optional, Tuple, Union

from bencomp.core.config import ShapeConfig
from bencomp.core.errors import ConfigurationError, InputError

if TYPE_CHECKING:
    from bencomp.generation.tree import TreeNode

logger = logging.getLogger(__name__)

CONFIG_FORMAT = "bencomp-shape"
CONFIG_VERSION = "0.1.0"


def read_input_file(path: Union[str, Path]) -> bytes:
    """Read a literal benchmark input.

    Raises:
        InputError: If the file cannot be read
    """
    try:
        return Path(path).read_bytes()
    except OSError as e:
        raise InputError(f"error while reading input file: {e}") from e


def serialize_tree(node: "TreeNode") -> bytes:
    """Encode a generated tree as compact UTF-8 JSON."""
    return json.dumps(node.to_dict(), separators=(",", ":"), ensure_ascii=False).encode("utf-8")


def compute_config_hash(config_dict: Dict[str, Any]) -> str:
    """Deterministic SHA256 of the fields that affect generation.

    Timestamps and other bookkeeping fields are excluded.
    """
    hashable_fields = {
        "format": config_dict.get("format"),
        "version": config_dict.get("version"),
        "shape": config_dict.get("shape"),
        "seed": config_dict.get("seed"),
    }
    hashable_fields = {k: v for k, v in hashable_fields.items() if v is not None}
    json_str = json.dumps(hashable_fields, sort_keys=True, ensure_ascii=True)
    return hashlib.sha256(json_str.encode("utf-8")).hexdigest()


def save_config(
    config: ShapeConfig,
    path: Union[str, Path],
    seed: Optional[int] = None,
) -> None:
    """Save a shape configuration (and optional seed) to a JSON file.

    Args:
        config: Shape configuration to persist
        path: Output file path
        seed: Random seed that reproduces a run with this config
    """
    config_dict = {
        "format": CONFIG_FORMAT,
        "version": CONFIG_VERSION,
        "created_at": datetime.now(timezone.utc).isoformat(),
        "shape": config.to_dict(),
    }
    if seed is not None:
        config_dict["seed"] = seed

    config_dict["config_hash"] = compute_config_hash(config_dict)

    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(config_dict, f, indent=2, ensure_ascii=True)


def load_config(path: Union[str, Path]) -> Tuple[ShapeConfig, Optional[int]]:
    """Load a shape configuration saved by :func:`save_config`.

    Returns:
        Tuple of (validated config, seed or None)

    Raises:
        ConfigurationError: If the file is unreadable or not a shape config
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            config_dict = json.load(f)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"error reading config file {path}: {e}") from e

    if not isinstance(config_dict, dict) or config_dict.get("format") != CONFIG_FORMAT:
        found = config_dict.get("format") if isinstance(config_dict, dict) else None
        raise ConfigurationError(f"Unsupported config format: {found}")

    if "config_hash" in config_dict:
        expected_hash = config_dict["config_hash"]
        actual_hash = compute_config_hash(config_dict)
        if expected_hash != actual_hash:
            logger.warning(f"Config hash mismatch. Expected {expected_hash}, got {actual_hash}")

    try:
        config = ShapeConfig.from_dict(config_dict.get("shape") or {})
    except (TypeError, ValueError, KeyError, AttributeError) as e:
        if isinstance(e, ConfigurationError):
            raise
        raise ConfigurationError(f"invalid shape in config file {path}: {e}") from e

    seed = config_dict.get("seed")
    if seed is not None and (not isinstance(seed, int) or isinstance(seed, bool) or seed < 0):
        raise ConfigurationError(f"invalid seed in config file {path}: {seed!r}")
    return config.validate(), seed
