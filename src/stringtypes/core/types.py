"""Type aliases used across stringtypes."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

JsonDict = dict[str, Any]
JsonPayload = JsonDict | str | bytes
UnitTable = Mapping[str, float]
