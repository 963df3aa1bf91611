"""Domain enumerations and formula identifier rules."""

import enum


class FormulaKind(str, enum.Enum):
    HAVERSINE = "haversine"
    COSINES = "cosines"
    VINCENTY = "vincenty"

    @classmethod
    def parse(cls, value: "str | FormulaKind") -> "FormulaKind | None":
        """Case-insensitive lookup. Returns ``None`` for unknown identifiers."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        return _BY_NAME.get(value.strip().lower())


_BY_NAME: dict[str, FormulaKind] = {kind.value: kind for kind in FormulaKind}

SUPPORTED_FORMULAS: tuple[str, ...] = tuple(kind.value for kind in FormulaKind)
