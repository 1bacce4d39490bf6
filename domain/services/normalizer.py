"""
Normalization of raw editor values into canonical typed values.

The entry editor works with whatever the form hands it: strings for every
input, None for untouched fields, loosely shaped dicts for nested sets and
members. This module turns those values into the canonical types the
domain models declare.

Rules:
- Numbers: '' or None -> None; integer text -> int; decimal text is
  truncated toward zero ("7.9" -> 7); anything unparseable or negative
  -> None (silent fallback, logged at debug level).
- Strings: None -> ''; everything else passes through unchanged.
- Collections: None -> []; otherwise the items keep their order.

Normalization never raises. Validation is the only stage that blocks a
commit.
"""

import logging
import math
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Type, Union, get_args, get_origin

from pydantic import BaseModel

from domain.models import CommonFields, ExerciseEntry, VariantTag, payload_type

logger = logging.getLogger(__name__)

COMMON_FIELD_NAMES = frozenset(CommonFields.model_fields)


def _fallback(field: str, value: Any) -> None:
    logger.debug("Normalization fallback: %s=%r became unset", field, value)


def normalize_int(value: Any, field: str = "value") -> Optional[int]:
    """
    Convert a raw numeric input to a non-negative int or None.

    Examples:
        >>> normalize_int("12")
        12
        >>> normalize_int("") is None
        True
        >>> normalize_int("abc") is None
        True
        >>> normalize_int("7.9")
        7
    """
    if value is None:
        return None
    if isinstance(value, bool):
        _fallback(field, value)
        return None

    number: Optional[int] = None
    if isinstance(value, int):
        number = value
    elif isinstance(value, float):
        number = _truncate(value)
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            number = int(text)
        except ValueError:
            try:
                number = _truncate(float(text))
            except ValueError:
                number = None

    if number is None or number < 0:
        _fallback(field, value)
        return None
    return number


def _truncate(value: float) -> Optional[int]:
    if not math.isfinite(value) or value < 0:
        return None
    return math.trunc(value)


def normalize_str(value: Any) -> str:
    """None becomes ''; strings pass through; other scalars are stringified."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(value)


def normalize_optional_id(value: Any) -> Optional[str]:
    """Exercise id for a column that stores NULL rather than ''."""
    text = normalize_str(value)
    return text if text.strip() else None


def normalize_list(value: Any, field: str = "value") -> List[Any]:
    """Absent collections become []. Item order is kept."""
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    _fallback(field, value)
    return []


def normalize_choice(enum_cls: Type[Enum], value: Any, field: str = "value") -> Optional[Enum]:
    if value is None or value == "":
        return None
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(str(value).strip().lower())
    except ValueError:
        _fallback(field, value)
        return None


def _normalize_value(annotation: Any, value: Any, field: str) -> Any:
    origin = get_origin(annotation)

    if origin is Union:
        inner = [arg for arg in get_args(annotation) if arg is not type(None)]
        if value is None:
            return None
        return _normalize_value(inner[0], value, field)

    if origin in (list, List):
        (item_type,) = get_args(annotation) or (Any,)
        return [
            _normalize_value(item_type, item, f"{field}[{i}]")
            for i, item in enumerate(normalize_list(value, field))
        ]

    if annotation is int:
        return normalize_int(value, field)
    if annotation is str:
        return normalize_str(value)
    if isinstance(annotation, type) and issubclass(annotation, Enum):
        return normalize_choice(annotation, value, field)
    if isinstance(annotation, type) and issubclass(annotation, BaseModel):
        return normalize_model_fields(annotation, value, field)
    return value


def normalize_model_fields(
    model_cls: Type[BaseModel],
    raw: Any,
    field: str = "value",
) -> Dict[str, Any]:
    """
    Normalize the raw values for `model_cls`, keyed by its field names.

    Each field is read by name, or by its camelCase alias when the name is
    absent. Keys the model does not declare are dropped. Keys that are
    absent stay absent so model defaults apply. A bare string given where
    a model with an `exercise_id` field is expected is read as that id.
    """
    if isinstance(raw, BaseModel):
        raw = raw.model_dump()
    elif isinstance(raw, str) and "exercise_id" in model_cls.model_fields:
        raw = {"exercise_id": raw}
    elif not isinstance(raw, Mapping):
        _fallback(field, raw)
        raw = {}

    data: Dict[str, Any] = {}
    for name, info in model_cls.model_fields.items():
        if name == "variant_tag":
            continue
        key = name if name in raw else info.alias
        if key is None or key not in raw:
            continue
        data[name] = _normalize_value(info.annotation, raw[key], f"{field}.{name}")
    return data


def normalize_common(raw: Mapping[str, Any]) -> CommonFields:
    """Build CommonFields from raw editor values."""
    data = normalize_model_fields(CommonFields, raw, "common")
    if "primary_exercise_id" in data:
        data["primary_exercise_id"] = normalize_optional_id(data["primary_exercise_id"])
    return CommonFields(**data)


def normalize_payload(variant_tag: VariantTag, raw: Mapping[str, Any]) -> Any:
    """
    Build the payload of `variant_tag` from raw editor values.

    Fields belonging to other variants are dropped.
    """
    model_cls = payload_type(variant_tag)
    return model_cls(**normalize_model_fields(model_cls, raw, VariantTag(variant_tag).value))


def normalize_entry(
    entry_id: str,
    order_index: int,
    variant_tag: VariantTag,
    common: Mapping[str, Any],
    fields: Mapping[str, Any],
) -> ExerciseEntry:
    """Build a complete (not yet validated) entry from raw editor values."""
    return ExerciseEntry(
        id=entry_id,
        order_index=order_index,
        common=normalize_common(common),
        payload=normalize_payload(variant_tag, fields),
    )
