"""
Shape configuration for generated inputs and resolution of command-line options.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, Union

from bencomp.core.errors import ConfigurationError
from bencomp.core.ranges import IntRange, parse_bandwidth, parse_range

DEFAULT_FIELD_NUM = 3
DEFAULT_MAX_DEPTH = 5
DEFAULT_DEGREE = 4
DEFAULT_STRING_LENGTH = 16

# Bounds recursion in the tree generator.
MAX_DEPTH_LIMIT = 64


class StringSourceKind(str, Enum):
    RANDOM = "random"
    GENERATED_DICTIONARY = "generated_dictionary"
    FILE_DICTIONARY = "file_dictionary"


@dataclass(frozen=True)
class StringSource:
    """Where node keys and values come from."""

    kind: StringSourceKind = StringSourceKind.RANDOM
    dict_size: int = 0
    dict_file: Optional[Path] = None

    @classmethod
    def random(cls) -> "StringSource":
        return cls()

    @classmethod
    def generated(cls, size: int) -> "StringSource":
        return cls(kind=StringSourceKind.GENERATED_DICTIONARY, dict_size=size)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "StringSource":
        return cls(kind=StringSourceKind.FILE_DICTIONARY, dict_file=Path(path))

    def to_dict(self) -> dict:
        data: Dict[str, Any] = {"kind": self.kind.value}
        if self.kind == StringSourceKind.GENERATED_DICTIONARY:
            data["dict_size"] = self.dict_size
        elif self.kind == StringSourceKind.FILE_DICTIONARY:
            data["dict_file"] = str(self.dict_file)
        return data

    @classmethod
    def from_dict(cls, config: dict) -> "StringSource":
        kind = StringSourceKind(config.get("kind", StringSourceKind.RANDOM.value))
        if kind == StringSourceKind.GENERATED_DICTIONARY:
            return cls.generated(int(config.get("dict_size", 0)))
        if kind == StringSourceKind.FILE_DICTIONARY:
            return cls.from_file(config["dict_file"])
        return cls.random()


@dataclass(frozen=True)
class ShapeConfig:
    """Constraints on the shape of a generated tree.

    Attributes:
        fields_per_node: Number of key/value pairs in each node
        degree: Number of children of each node above ``max_depth``
        max_depth: Depth at which nodes stop receiving children
        string_length: Length of randomly generated keys and values
        string_source: Strategy used to produce keys and values
    """

    fields_per_node: IntRange = field(default_factory=lambda: IntRange.fixed(DEFAULT_FIELD_NUM))
    degree: IntRange = field(default_factory=lambda: IntRange.fixed(DEFAULT_DEGREE))
    max_depth: int = DEFAULT_MAX_DEPTH
    string_length: IntRange = field(default_factory=lambda: IntRange.fixed(DEFAULT_STRING_LENGTH))
    string_source: StringSource = field(default_factory=StringSource.random)

    def validate(self) -> "ShapeConfig":
        """Check every constraint, returning ``self`` when the config is usable.

        Raises:
            ConfigurationError: On the first violated constraint
        """
        if self.fields_per_node.minimum < 0:
            raise ConfigurationError("number of fields must be 0 or greater")
        if self.degree.minimum < 0:
            raise ConfigurationError("degree must be 0 or greater")
        if not 0 <= self.max_depth <= MAX_DEPTH_LIMIT:
            raise ConfigurationError(
                f"max depth must be between 0 and {MAX_DEPTH_LIMIT}, got {self.max_depth}"
            )
        if self.string_length.minimum < 1:
            raise ConfigurationError("string length must be 1 or greater")

        source = self.string_source
        if source.kind == StringSourceKind.GENERATED_DICTIONARY and source.dict_size < 1:
            raise ConfigurationError("dictionary size must be 1 or greater")
        if source.kind == StringSourceKind.FILE_DICTIONARY:
            path = source.dict_file
            if path is None or not path.is_file() or not os.access(path, os.R_OK):
                raise ConfigurationError(f"error reading dictionary file: {path}")
        return self

    def to_dict(self) -> dict:
        return {
            "fields_per_node": [self.fields_per_node.minimum, self.fields_per_node.maximum],
            "degree": [self.degree.minimum, self.degree.maximum],
            "max_depth": self.max_depth,
            "string_length": [self.string_length.minimum, self.string_length.maximum],
            "string_source": self.string_source.to_dict(),
        }

    @classmethod
    def from_dict(cls, config: dict) -> "ShapeConfig":
        defaults = cls()

        def _range(key: str, default: IntRange) -> IntRange:
            bounds = config.get(key)
            if bounds is None:
                return default
            low, high = bounds
            return IntRange.inclusive(int(low), int(high))

        return cls(
            fields_per_node=_range("fields_per_node", defaults.fields_per_node),
            degree=_range("degree", defaults.degree),
            max_depth=int(config.get("max_depth", defaults.max_depth)),
            string_length=_range("string_length", defaults.string_length),
            string_source=StringSource.from_dict(config.get("string_source") or {}),
        )


@dataclass(frozen=True)
class ReportOptions:
    """Display toggles and network model parameters for the result table."""

    show_input: bool = False
    show_compress_time: bool = False
    show_decompress_time: bool = False
    network_bandwidth: int = 0
    network_payloads: int = 1


def _exclusive(first: str, first_value: Any, second: str, second_value: Any) -> None:
    if first_value is not None and second_value is not None:
        raise ConfigurationError(f"options --{first} and --{second} are mutually exclusive")


def resolve_shape_config(
    num_fields: Optional[int] = None,
    num_fields_range: Optional[str] = None,
    max_depth: int = DEFAULT_MAX_DEPTH,
    degree: Optional[int] = None,
    degree_range: Optional[str] = None,
    str_len: Optional[int] = None,
    str_len_range: Optional[str] = None,
    dict_file: Optional[Union[str, Path]] = None,
    dict_size: Optional[int] = None,
) -> ShapeConfig:
    """Turn the flat set of generation options into a validated ShapeConfig.

    A fixed value and its range counterpart are mutually exclusive, as are a
    dictionary file and a dictionary size. A dictionary file overrides the
    string length options, since file entries keep their own length.

    Raises:
        ConfigurationError: If the options are malformed or contradictory
    """
    _exclusive("json-num-fields", num_fields, "json-num-fields-range", num_fields_range)
    _exclusive("json-degree", degree, "json-degree-range", degree_range)
    _exclusive("json-str-len", str_len, "json-str-len-range", str_len_range)
    _exclusive("json-dict-file", dict_file, "json-dict-size", dict_size)

    if num_fields is not None:
        fields_range = IntRange.fixed(num_fields)
    elif num_fields_range:
        fields_range = parse_range(num_fields_range)
    else:
        fields_range = IntRange.fixed(DEFAULT_FIELD_NUM)

    if degree_range:
        degree_draw = parse_range(degree_range)
    elif degree is not None:
        degree_draw = IntRange.fixed(degree)
    else:
        degree_draw = IntRange.fixed(DEFAULT_DEGREE)

    if dict_file:
        length = IntRange.fixed(DEFAULT_STRING_LENGTH)
        source = StringSource.from_file(dict_file)
    else:
        if str_len_range:
            length = parse_range(str_len_range)
        else:
            length = IntRange.fixed(str_len if str_len is not None else DEFAULT_STRING_LENGTH)
        if dict_size is not None:
            if dict_size < 1:
                raise ConfigurationError("invalid argument for --json-dict-size: must be 1 or greater")
            source = StringSource.generated(dict_size)
        else:
            source = StringSource.random()

    config = ShapeConfig(
        fields_per_node=fields_range,
        degree=degree_draw,
        max_depth=max_depth,
        string_length=length,
        string_source=source,
    )
    return config.validate()


def resolve_report_options(
    network_bandwidth: Optional[str] = None,
    network_payloads: Optional[int] = None,
    show_input: bool = False,
    show_compress_time: bool = False,
    show_decompress_time: bool = False,
) -> ReportOptions:
    """Build ReportOptions; a missing or zero payload count means one payload."""
    if network_payloads is not None and network_payloads < 0:
        raise ConfigurationError("number of network payloads must be 0 or greater")

    return ReportOptions(
        show_input=show_input,
        show_compress_time=show_compress_time,
        show_decompress_time=show_decompress_time,
        network_bandwidth=parse_bandwidth(network_bandwidth or ""),
        network_payloads=network_payloads or 1,
    )


def validate_trial_count(count: int) -> int:
    if count <= 0:
        raise ConfigurationError("value for --count must be a positive integer")
    return count
