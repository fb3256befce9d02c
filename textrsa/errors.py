class RSATextError(ValueError):
    """Base class for failures raised by the textrsa pipeline."""


class NoCoprimeError(RSATextError):
    def __init__(self, phi: int):
        super().__init__(f"no coprime found for phi={phi}")
        self.phi = phi


class PrimeSearchExhaustedError(RSATextError):
    def __init__(self, low: int, high: int, attempts: int):
        super().__init__(
            f"no prime found in [{low}, {high}] after {attempts} attempts"
        )
        self.low = low
        self.high = high
        self.attempts = attempts


class MessageUnitOverflowError(RSATextError):
    def __init__(self, unit: int, index: int, modulus: int):
        super().__init__(
            f"Unit {unit} at position {index} is >= n={modulus}. Choose larger primes."
        )
        self.unit = unit
        self.index = index
        self.modulus = modulus
