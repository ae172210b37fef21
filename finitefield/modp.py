import logging

from py_ecc.utils import prime_field_inv

from .errors import DivisionByZero, InvalidFieldConfiguration
from .numbertype import FieldElement, memoize, typecheck

logger = logging.getLogger(__name__)


def isPrime(n):
    if n < 2:
        return False

    d = 2
    while d * d <= n:
        if n % d == 0:
            return False
        d += 1

    return True


# so all IntegersModP are instances of the same base class
class _Modular(FieldElement):
    pass


@memoize
def IntegersModP(p):
    if not isinstance(p, int) or not isPrime(p):
        raise InvalidFieldConfiguration("The modulus %r is not a prime" % (p,))

    logger.debug("Building the field Z/%d", p)

    class IntegerModP(_Modular):
        def __init__(self, n):
            try:
                self.n = int(n) % IntegerModP.p
            except (TypeError, ValueError):
                raise TypeError(
                    "Can't cast type %s to %s in __init__"
                    % (type(n).__name__, type(self).__name__)
                )

            self.field = IntegerModP

        @typecheck
        def __add__(self, other):
            return IntegerModP(self.n + other.n)

        @typecheck
        def __sub__(self, other):
            return IntegerModP(self.n - other.n)

        @typecheck
        def __mul__(self, other):
            return IntegerModP(self.n * other.n)

        def __neg__(self):
            return IntegerModP(-self.n)

        def __eq__(self, other):
            if isinstance(other, int):
                other = IntegerModP(other)
            return isinstance(other, IntegerModP) and self.n == other.n

        def inverse(self):
            if self.n == 0:
                raise DivisionByZero("0 has no inverse in %s" % IntegerModP.__name__)

            return IntegerModP(prime_field_inv(self.n, IntegerModP.p))

        def isSquare(self):
            """Euler's criterion. Zero counts as a square."""
            if self.n == 0:
                return True
            return pow(self.n, (IntegerModP.p - 1) // 2, IntegerModP.p) == 1

        def __str__(self):
            return str(self.n)

        def __repr__(self):
            return "%d (mod %d)" % (self.n, self.p)

        def __int__(self):
            return self.n

        def __hash__(self):
            return hash((self.n, self.p))

    IntegerModP.p = p
    IntegerModP.__name__ = 'Z/%d' % (p)
    IntegerModP.englishName = 'IntegersMod%d' % (p)
    return IntegerModP
