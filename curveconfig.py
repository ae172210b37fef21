from collections import namedtuple

from finitefield.quadratic import QuadraticExtension
from elliptic import EllipticCurve

# p: the prime, c: the non-residue defining t^2 = -c,
# a, b: curve coefficients as pairs (a0, a1) meaning a0 + a1 t
CurveConfig = namedtuple('CurveConfig', ['p', 'c', 'a', 'b'])

# y^2 = x^3 + x + 1 over F_5[t]/(t^2 + 2)
DEFAULT_CONFIG = CurveConfig(p=5, c=2, a=(1, 0), b=(1, 0))


def build_field(config=DEFAULT_CONFIG):
    return QuadraticExtension(config.p, config.c)


def build_curve(config=DEFAULT_CONFIG):
    F = build_field(config)
    return EllipticCurve(F(config.a), F(config.b))
