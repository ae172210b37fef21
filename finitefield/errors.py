
class DivisionByZero(ZeroDivisionError):
   """Raised when inverting the zero element of a field."""


class InvalidFieldConfiguration(ValueError):
   """Raised when field parameters do not define a field.

   The modulus must be an odd prime, and t^2 + c must be irreducible over
   the prime field for the quadratic extension to be a field.
   """
