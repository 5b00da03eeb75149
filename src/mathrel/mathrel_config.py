"""Configuration for mathrel comparisons."""

from dataclasses import dataclass, replace
import json
import math
import sys

from mathrel.mathrel_error import MathrelConfigError


DEFAULT_EPSILON = sys.float_info.epsilon


@dataclass(frozen=True)
class MathrelConfig:
    """
    Comparison settings.

    Instances are immutable.  A comparator reads its config once per call, so
    swapping in a new config never changes the outcome of a call in flight.
    """
    epsilon: float = DEFAULT_EPSILON

    def __post_init__(self) -> None:
        if isinstance(self.epsilon, bool) or not isinstance(self.epsilon, (int, float)):
            raise MathrelConfigError(
                "Tolerance must be a real number",
                received=type(self.epsilon).__name__,
                expected="float"
            )

        if not math.isfinite(self.epsilon):
            raise MathrelConfigError(
                "Tolerance must be finite",
                received=repr(self.epsilon),
                suggestion="Use 0 to request exact comparison"
            )

    @classmethod
    def create_default(cls) -> "MathrelConfig":
        """Create a config with default values."""
        return cls(epsilon=DEFAULT_EPSILON)

    def with_epsilon(self, epsilon: float) -> "MathrelConfig":
        """Return a copy of this config with a different tolerance."""
        return replace(self, epsilon=epsilon)

    @classmethod
    def load(cls, path: str) -> "MathrelConfig":
        """
        Load config from a JSON file.

        Keys that are not recognised are ignored, and missing keys keep their
        default values.

        Args:
            path: Path to the config file

        Returns:
            MathrelConfig with loaded values

        Raises:
            MathrelConfigError: If the file cannot be read or holds invalid values
        """
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)

        except (OSError, json.JSONDecodeError) as e:
            raise MathrelConfigError(f"Cannot load config from {path}", context=str(e)) from e

        if not isinstance(data, dict):
            raise MathrelConfigError(
                f"Config file {path} must contain a JSON object",
                received=type(data).__name__
            )

        return cls(epsilon=data.get("epsilon", DEFAULT_EPSILON))

    def save(self, path: str) -> None:
        """
        Save config to a JSON file.

        Args:
            path: Path to the config file
        """
        data = {
            "epsilon": self.epsilon
        }

        with open(path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=4)
