"""Cross-module type aliases."""

from __future__ import annotations

from collections.abc import Callable
from typing import Literal, TypeAlias

JsonScalar: TypeAlias = str | int | float | bool | None
JsonValue: TypeAlias = JsonScalar | list["JsonValue"] | dict[str, "JsonValue"]
JsonObject: TypeAlias = dict[str, JsonValue]

Bucket: TypeAlias = Literal["critical", "passed", "advise"]

Predicate: TypeAlias = Callable[[JsonObject], int]
