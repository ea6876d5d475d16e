"""Exception types raised by the derivation engine.

- InvalidTypeCodeError: malformed input code (caller error)
- RuleGraphError / CyclicRuleGraphError: rule graph configuration defects,
  raised when a graph is built, never while resolving an input
- DerivationError: internal consistency violation during a derivation
"""


class TypologyError(Exception):
    """Base class for all typology errors."""

    pass


class InvalidTypeCodeError(TypologyError, ValueError):
    """Raised when a type code is not one of the 16 valid four-letter codes."""

    def __init__(self, code: object, reason: str):
        self.code = code
        self.reason = reason
        super().__init__(f"Invalid type code {code!r}: {reason}")


class RuleGraphError(TypologyError):
    """Raised when a rule graph is misconfigured."""

    pass


class CyclicRuleGraphError(RuleGraphError):
    """Raised when circular dependencies are detected between rules."""

    def __init__(self, remaining: list[str]):
        self.remaining = remaining
        super().__init__(f"Circular dependency detected involving: {remaining}")


class DerivationError(TypologyError):
    """Raised when a rule cannot produce a consistent value for a valid code."""

    pass
