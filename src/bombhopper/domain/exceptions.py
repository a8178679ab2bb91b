class InvalidAmmoChar(ValueError):
    """Raised when a magazine string contains a character that is not b, g or e."""

    def __init__(self, char: str, index: int) -> None:
        super().__init__(f"Unknown ammo {char!r} at position {index}; expected one of 'b', 'g', 'e'.")
        self.char = char
        self.index = index
