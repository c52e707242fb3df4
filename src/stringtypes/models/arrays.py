"""String list wrapper for comma-separated values."""

from __future__ import annotations

from stringtypes.models.base import StringEncoded

# Unicode White_Space; str.strip() would also drop the U+001C-U+001F separators
WHITESPACE = "\t\n\v\f\r \x85\xa0" + "".join(
    map(chr, (0x1680, *range(0x2000, 0x200B), 0x2028, 0x2029, 0x202F, 0x205F, 0x3000))
)


class StringArray(StringEncoded[list[str]]):
    """A list of strings encoded as ``"a,b,c"``, ``"[a, b]"`` or ``'["a", "b"]'``.

    Every leading and trailing ``[``/``]`` is stripped, the remainder is split
    on each comma, and each part loses surrounding whitespace and then any
    surrounding double quotes. An empty token yields ``[""]``.
    """

    __slots__ = ()
    example = "[host1, host2]"

    def __init__(self, value: list[str] | None = None) -> None:
        super().__init__(None if value is None else list(value))

    @classmethod
    def zero(cls) -> list[str]:
        return []

    @classmethod
    def parse(cls, token: str) -> list[str]:
        return [part.strip(WHITESPACE).strip('"') for part in token.strip("[]").split(",")]

    def value(self) -> list[str]:
        return list(self._value)
