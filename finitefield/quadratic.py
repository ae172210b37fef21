import itertools
import logging

from .errors import DivisionByZero, InvalidFieldConfiguration
from .modp import IntegersModP, _Modular
from .numbertype import FieldElement, memoize, typecheck

logger = logging.getLogger(__name__)


# so all quadratic extensions are instances of the same base class
class _Quadratic(FieldElement):
    pass


@memoize
def QuadraticExtension(p, c):
    """The field F_p[t] / (t^2 + c), whose elements are a + b t.

    t^2 + c has to be irreducible over F_p, i.e. -c must not be a
    square mod p. Characteristic 2 is not supported.
    """
    Fp = IntegersModP(p)
    if p == 2:
        raise InvalidFieldConfiguration("Characteristic 2 is not supported")

    if Fp(-c).isSquare():
        raise InvalidFieldConfiguration(
            "t^2 + %d is reducible over %s: %d is a square" % (c, Fp.__name__, (-c) % p))

    nonResidue = Fp(c)
    logger.debug("Building the field %s[t]/(t^2 + %d)", Fp.__name__, c)

    class ExtensionElement(_Quadratic):
        operatorPrecedence = 2

        def __init__(self, a, b=0):
            if isinstance(a, ExtensionElement):
                a, b = a.a, a.b
            elif isinstance(a, tuple):
                if len(a) != 2:
                    raise TypeError("Expected a pair (a, b), got %r" % (a,))
                a, b = a
            elif not isinstance(a, (int, _Modular)):
                raise TypeError(
                    "Can't cast type %s to %s in __init__"
                    % (type(a).__name__, type(self).__name__))

            self.a = int(Fp(a))
            self.b = int(Fp(b))
            self.field = ExtensionElement

        def coefficients(self):
            return Fp(self.a), Fp(self.b)

        @typecheck
        def __add__(self, other):
            return ExtensionElement(self.a + other.a, self.b + other.b)

        @typecheck
        def __sub__(self, other):
            return ExtensionElement(self.a - other.a, self.b - other.b)

        @typecheck
        def __mul__(self, other):
            # (a + bt)(d + et) = ad + (ae + bd)t + be t^2, with t^2 = -c
            a, b = self.coefficients()
            d, e = other.coefficients()
            return ExtensionElement(a * d - nonResidue * b * e, a * e + b * d)

        def __neg__(self):
            return ExtensionElement(-self.a, -self.b)

        def __eq__(self, other):
            if isinstance(other, (int, _Modular)):
                other = ExtensionElement(other)
            return isinstance(other, ExtensionElement) and (self.a, self.b) == (other.a, other.b)

        def __hash__(self):
            return hash((self.a, self.b, p, c))

        def conjugate(self):
            return ExtensionElement(self.a, -self.b)

        def norm(self):
            # (a + bt)(a - bt) = a^2 + c b^2, an element of the prime field
            a, b = self.coefficients()
            return a * a + nonResidue * b * b

        def inverse(self):
            if self.a == 0 and self.b == 0:
                raise DivisionByZero("0 has no inverse in %s" % ExtensionElement.__name__)

            # never zero for nonzero elements when t^2 + c is irreducible
            N = self.norm()
            if N == 0:
                raise DivisionByZero("%s has norm zero" % self)

            Ninv = N.inverse()
            a, b = self.coefficients()
            return ExtensionElement(a * Ninv, -b * Ninv)

        def isZero(self):
            return self.a == 0 and self.b == 0

        def __str__(self):
            if self.b == 0:
                return str(self.a)
            if self.a == 0:
                return "%dt" % self.b
            return "%d + %dt" % (self.a, self.b)

        def __repr__(self):
            return "%s(%d, %d)" % (ExtensionElement.englishName, self.a, self.b)

        @classmethod
        def zero(cls):
            return cls(0, 0)

        @classmethod
        def one(cls):
            return cls(1, 0)

        @classmethod
        def elements(cls):
            """All p^2 elements, ordered lexicographically by (a, b)."""
            return (cls(a, b) for a, b in itertools.product(range(p), repeat=2))

    ExtensionElement.p = p
    ExtensionElement.c = c
    ExtensionElement.order = p * p
    ExtensionElement.primeSubfield = Fp
    ExtensionElement.__name__ = 'F_%d^2' % (p)
    ExtensionElement.englishName = 'F%dx2' % (p)
    return ExtensionElement
