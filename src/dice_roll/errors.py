from __future__ import annotations


class DiceError(ValueError):
    """User-facing validation errors (fail-fast, no roll performed)."""


class DiceSyntaxError(DiceError):
    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(
            f"Failed to parse dice expression '{token}'. Expected format 'NdS' (e.g. 1d20, 4d8), "
            "optionally followed by 'a' or 'd'."
        )


class TrailingContentError(DiceError):
    def __init__(self, token: str, remainder: str) -> None:
        self.token = token
        self.remainder = remainder
        super().__init__(f"Invalid dice format '{token}'. Unparsed content: '{remainder}'")


class ZeroSidesError(DiceError):
    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__("Dice cannot have 0 sides.")
