"""
Choice-option normalization.

Question options arrive in whatever shape the survey editor stored them.
They are folded to a plain list of labels here and nowhere else.
"""

from __future__ import annotations

from collections.abc import Mapping
import re
from typing import Any

from surveystats.core.exceptions import ValidationError

_SEPARATORS = re.compile(r'[\n,]')


def choice_label(item: Any) -> str | None:
    """
    Label of one option or one selected choice.

    Strings are stripped; mappings use 'label', then 'value'. Blank labels
    yield None.
    """
    if item is None:
        return None
    if isinstance(item, Mapping):
        item = item.get('label', item.get('value'))
        if item is None:
            return None
    label = str(item).strip()
    return label or None


def normalize_options(options: Any) -> list[str]:
    """
    Canonical list of option labels.

    Accepts a list or tuple of labels (or {'label'|'value': ...} mappings),
    a mapping {'choices': [...]}, a newline- or comma-separated string, or
    None. Blank labels are dropped; duplicates keep their first position.

    Raises:
        ValidationError: unsupported shape
    """
    if options is None:
        return []
    if isinstance(options, Mapping):
        if 'choices' not in options:
            raise ValidationError(
                f"options: mapping must have a 'choices' key, got keys {sorted(map(str, options))}"
            )
        return normalize_options(options['choices'])
    if isinstance(options, str):
        items: list[Any] = _SEPARATORS.split(options)
    elif isinstance(options, (list, tuple)):
        items = list(options)
    else:
        raise ValidationError(
            f"options: expected list, tuple, string, {{'choices': [...]}} or None, "
            f"got {type(options).__name__}"
        )

    labels: list[str] = []
    for item in items:
        label = choice_label(item)
        if label is not None and label not in labels:
            labels.append(label)
    return labels
