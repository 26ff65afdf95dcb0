"""
Stat modifiers and the two-slot modifier stack.

A Modifier is a buff or debuff: additive, multiplicative, or none at all.
Additive amounts stack by addition, multiplicative factors stack by
multiplication, so doubling attack twice is a factor of 4.
"""

from enum import Enum, auto
from dataclasses import dataclass, field

from rpgcore.errors import InvalidRangeError, MismatchedModifierError


class ModifierKind(Enum):
    """Variants of a stat modifier."""
    ADDITIVE = auto()
    MULTIPLICATIVE = auto()
    NONE = auto()


@dataclass(frozen=True)
class Modifier:
    """
    A buff or debuff applied to a stat.

    Attributes:
        kind: Which variant this modifier is.
        amount: The amount added (ADDITIVE) or the factor multiplied (MULTIPLICATIVE).
            Ignored for NONE.
    """
    kind: ModifierKind
    amount: float = 0.0

    @classmethod
    def additive(cls, amount: float) -> 'Modifier':
        return cls(ModifierKind.ADDITIVE, float(amount))

    @classmethod
    def multiplicative(cls, factor: float) -> 'Modifier':
        return cls(ModifierKind.MULTIPLICATIVE, float(factor))

    @classmethod
    def none(cls) -> 'Modifier':
        return cls(ModifierKind.NONE, 0.0)

    @property
    def factor(self) -> float:
        """The multiplier of a MULTIPLICATIVE modifier."""
        return self.amount

    def _check_same_kind(self, other: 'Modifier', verb: str) -> None:
        if self.kind is not other.kind:
            raise MismatchedModifierError(
                f"Modifiers can only be {verb} modifiers of the same variant "
                f"({self.kind.name} vs {other.kind.name})"
            )

    def __add__(self, other: 'Modifier') -> 'Modifier':
        if not isinstance(other, Modifier):
            return NotImplemented
        self._check_same_kind(other, "added to")
        if self.kind is ModifierKind.ADDITIVE:
            return Modifier.additive(self.amount + other.amount)
        if self.kind is ModifierKind.MULTIPLICATIVE:
            return Modifier.multiplicative(self.amount * other.amount)
        return Modifier.none()

    def __sub__(self, other: 'Modifier') -> 'Modifier':
        if not isinstance(other, Modifier):
            return NotImplemented
        self._check_same_kind(other, "subtracted from")
        if self.kind is ModifierKind.ADDITIVE:
            return Modifier.additive(self.amount - other.amount)
        if self.kind is ModifierKind.MULTIPLICATIVE:
            if other.amount == 0:
                # x0 wipes the total; it cannot be divided back out.
                raise InvalidRangeError("Cannot remove a multiplicative modifier with a factor of 0")
            return Modifier.multiplicative(self.amount / other.amount)
        return Modifier.none()

    def __str__(self) -> str:
        if self.kind is ModifierKind.ADDITIVE:
            prefix = "+" if self.amount >= 0 else ""
            return f"{prefix}{self.amount:g}"
        if self.kind is ModifierKind.MULTIPLICATIVE:
            return f"x{self.amount:g}"
        return "none"


def _default_additive() -> Modifier:
    return Modifier.additive(0.0)


def _default_multiplicative() -> Modifier:
    return Modifier.multiplicative(1.0)


@dataclass
class Modifiers:
    """
    The modifier stack of a single stat.

    Every added modifier is folded into one of two running totals.
    ``additive`` always holds an ADDITIVE modifier and ``multiplicative``
    always holds a MULTIPLICATIVE one.
    """
    additive: Modifier = field(default_factory=_default_additive)
    multiplicative: Modifier = field(default_factory=_default_multiplicative)

    def __post_init__(self):
        if self.additive.kind is not ModifierKind.ADDITIVE:
            raise MismatchedModifierError(
                f"additive slot requires an ADDITIVE modifier, got {self.additive.kind.name}"
            )
        if self.multiplicative.kind is not ModifierKind.MULTIPLICATIVE:
            raise MismatchedModifierError(
                f"multiplicative slot requires a MULTIPLICATIVE modifier, got {self.multiplicative.kind.name}"
            )

    def add(self, modifier: Modifier) -> None:
        """
        Stack a modifier onto the matching total.

        Adding +5 then +2 gives +7; adding x2 then x3 gives x6. NONE is ignored.
        """
        if modifier.kind is ModifierKind.MULTIPLICATIVE:
            self.multiplicative = self.multiplicative + modifier
        elif modifier.kind is ModifierKind.ADDITIVE:
            self.additive = self.additive + modifier

    def remove(self, modifier: Modifier) -> None:
        """
        Take a modifier back off the matching total.

        Removing +5 from +2 gives -3; totals are not floored at zero.
        """
        if modifier.kind is ModifierKind.MULTIPLICATIVE:
            self.multiplicative = self.multiplicative - modifier
        elif modifier.kind is ModifierKind.ADDITIVE:
            self.additive = self.additive - modifier
