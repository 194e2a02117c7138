from __future__ import annotations


class PBKDF2DemoError(Exception):
    """Base class for every error the demo reports to the user."""


class ValidationError(PBKDF2DemoError, ValueError):
    def __init__(self, name: str, message: str):
        super().__init__(message)
        self.name = name


class NotANumberError(ValidationError):
    def __init__(self, name: str):
        super().__init__(name, f'"{name}" is not an integer')


class BelowMinimumError(ValidationError):
    def __init__(self, name: str, minimum: int):
        super().__init__(name, f'"{name}" is smaller than minimum value of {minimum}')
        self.minimum = minimum


class AboveMaximumError(ValidationError):
    def __init__(self, name: str, maximum: int):
        super().__init__(name, f'"{name}" is larger than maximum value of {maximum}')
        self.maximum = maximum


class HexDecodingError(PBKDF2DemoError, ValueError):
    pass


class InvalidHexDigitError(HexDecodingError):
    def __init__(self, name: str, position: int, char: str):
        super().__init__(f"\"{name}\" contains illegal hex value '{char}' at position {position}")
        self.name = name
        self.position = position
        self.char = char


class DerivationError(PBKDF2DemoError, RuntimeError):
    pass


class UnsupportedAlgorithmError(DerivationError):
    def __init__(self, algorithm: str):
        super().__init__(f"Hash algorithm not supported by this backend: {algorithm}")
        self.algorithm = algorithm
