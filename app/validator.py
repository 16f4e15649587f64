"""Request-shape validation.

Rules map a field name to a constraint token:

- ``required``: the field must be present and be a non-empty string.
- ``optional``: the field may be absent; when present it follows ``required``.

validate() raises ValidationError for the first field that fails, in rule
order. It has no other side effects.
"""

from collections.abc import Mapping
from typing import Any

from app.errors import ValidationError

REQUIRED = "required"
OPTIONAL = "optional"

CONSTRAINTS = frozenset({REQUIRED, OPTIONAL})


def validate(data: Any, rules: Mapping[str, str]) -> None:
    """
    Check ``data`` against ``rules``.

    Raises:
        ValidationError: If data is not a mapping, or a field is missing,
            blank or not a string.
        ValueError: If a rule uses an unknown constraint token.
    """
    for field, constraint in rules.items():
        if constraint not in CONSTRAINTS:
            raise ValueError(f"Unknown constraint {constraint!r} for field {field!r}")

    if not isinstance(data, Mapping):
        raise ValidationError('"body" enviado deve ser do tipo Object.', key="object")

    for field, constraint in rules.items():
        if field not in data or data[field] is None:
            if constraint == OPTIONAL:
                continue
            raise ValidationError(f'"{field}" é um campo obrigatório.', key=field)

        value = data[field]
        if not isinstance(value, str):
            raise ValidationError(f'"{field}" deve ser do tipo String.', key=field)
        if not value.strip():
            raise ValidationError(f'"{field}" não pode estar em branco.', key=field)
