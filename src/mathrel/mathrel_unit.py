"""
Physical-unit quantities for mathrel comparisons.

Quantities are pint quantities.  A comparison reads the magnitude in base
units, and two quantities are comparable only when their dimensionality
matches.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Union

import pint

from mathrel.mathrel_error import MathrelError


# Decimal magnitudes get a registry whose conversion factors are Decimal too,
# so scaling them stays exact.
_registry = pint.UnitRegistry()
_decimal_registry = pint.UnitRegistry(non_int_type=Decimal)


UnitValue = Union[int, float, Decimal]


def check_compatible(u: Any, v: Any) -> bool:
    """Two dimensionalities are compatible iff every base exponent matches."""
    return u == v


def describe_dimensions(dimensions: Any) -> str:
    """Describe a dimensionality, e.g. '[length]' or 'dimensionless'."""
    text = str(dimensions)
    return text if text else "dimensionless"


def define_unit(definition: str) -> None:
    """
    Add a unit to the registries, e.g. "smoot = 1.7018 * meter".

    Raises:
        MathrelError: If pint cannot parse the definition
    """
    try:
        _registry.define(definition)
        _decimal_registry.define(definition)

    except pint.errors.DefinitionSyntaxError as e:
        raise MathrelError(f"Invalid unit definition: {definition}", context=str(e)) from e


@dataclass(frozen=True, eq=False)
class MathrelUnit:
    """A quantity with physical dimensions, backed by a pint quantity."""
    quantity: Any

    @classmethod
    def create(cls, value: UnitValue, unit_name: str) -> "MathrelUnit":
        """
        Create a quantity from a value and a unit expression.

        Args:
            value: Magnitude in the named unit
            unit_name: Unit expression pint understands, e.g. "cm" or "kg*m/s**2"

        Returns:
            The quantity

        Raises:
            MathrelError: If the unit is not defined
        """
        registry = _decimal_registry if isinstance(value, Decimal) else _registry
        try:
            return cls(registry.Quantity(value, unit_name))

        except pint.errors.UndefinedUnitError as e:
            raise MathrelError(
                f"Unknown unit: {unit_name}",
                context=str(e),
                suggestion="Define it first with define_unit()"
            ) from e

    @property
    def value(self) -> UnitValue:
        """The magnitude expressed in base units."""
        return self.quantity.to_base_units().magnitude

    @property
    def dimensions(self) -> Any:
        return self.quantity.dimensionality

    def equal_base(self, other: "MathrelUnit") -> bool:
        """Check if this quantity has the same base dimensions as another."""
        return check_compatible(self.dimensions, other.dimensions)

    def type_name(self) -> str:
        return "unit"

    def describe(self) -> str:
        """Describe the quantity in its own unit, e.g. '5 m'."""
        return f"{self.quantity:~}"

    def describe_base(self) -> str:
        return describe_dimensions(self.dimensions)
