from finitefield.errors import InvalidFieldConfiguration


class PointNotOnCurve(ValueError):
   pass


class InvalidScalar(ValueError):
   pass


class SingularCurve(InvalidFieldConfiguration):
   pass


class EllipticCurve(object):
   def __init__(self, a, b):
      # assume we're already in the Weierstrass form y^2 = x^3 + ax + b
      if type(a) is not type(b):
         raise TypeError("Curve coefficients must lie in the same field")

      self.a = a
      self.b = b
      self.field = type(a)

      self.discriminant = -16 * (4 * a*a*a + 27 * b * b)
      if not self.isSmooth():
         raise SingularCurve("The curve %s is not smooth!" % self)


   def isSmooth(self):
      return self.discriminant != 0


   def rhs(self, x):
      return x*x*x + self.a * x + self.b


   def testPoint(self, x, y):
      return y*y == self.rhs(x)


   def point(self, x, y):
      return Affine(self, x, y)


   def infinity(self):
      return Infinity(self)


   def __str__(self):
      return 'y^2 = x^3 + (%s)x + (%s)' % (self.a, self.b)


   def __repr__(self):
      return str(self)


   def __eq__(self, other):
      return isinstance(other, EllipticCurve) and (self.a, self.b) == (other.a, other.b)


   def __hash__(self):
      return hash((self.a, self.b))


class CurvePoint(object):
   """A point of an elliptic curve: either Infinity or Affine(x, y)."""

   def __init__(self, curve):
      self.curve = curve

   def isInfinity(self):
      raise NotImplementedError

   def __sub__(self, Q):
      return self + -Q

   def __mul__(self, n):
      if isinstance(n, bool) or not isinstance(n, int):
         raise TypeError("Can't scale a point by something which isn't an int!")
      if n < 0:
         raise InvalidScalar("Can't scale a point by a negative integer: %d" % n)

      # double-and-add over the bits of n
      result = self.curve.infinity()
      addend = self

      while n:
         if n & 1:
            result = result + addend
         addend = addend + addend
         n >>= 1

      return result

   def __rmul__(self, n):
      return self * n

   def _checkCurve(self, Q):
      if not isinstance(Q, CurvePoint):
         raise TypeError("Can't add a point and %s" % type(Q).__name__)
      if self.curve != Q.curve:
         raise ValueError("Can't add points on different curves!")


class Affine(CurvePoint):
   def __init__(self, curve, x, y):
      super().__init__(curve)
      self.x = curve.field(x)
      self.y = curve.field(y)

      if not curve.testPoint(self.x, self.y):
         raise PointNotOnCurve("The point %s is not on the given curve %s!" % (self, curve))

   def isInfinity(self):
      return False

   def __str__(self):
      return "(%s, %s)" % (self.x, self.y)

   def __repr__(self):
      return "Affine(%r, %r)" % (self.x, self.y)

   def __neg__(self):
      return Affine(self.curve, self.x, -self.y)

   def __add__(self, Q):
      self._checkCurve(Q)
      if Q.isInfinity():
         return self

      x_1, y_1, x_2, y_2 = self.x, self.y, Q.x, Q.y

      if x_1 == x_2 and y_1 + y_2 == 0:
         return Infinity(self.curve)

      if x_1 == x_2:
         # both points are on the curve, so here y_1 == y_2 != 0
         # slope of the tangent line
         m = (3 * x_1 * x_1 + self.curve.a) / (2 * y_1)
      else:
         # slope of the secant line
         m = (y_2 - y_1) / (x_2 - x_1)

      x_3 = m*m - x_1 - x_2
      y_3 = m*(x_1 - x_3) - y_1

      return Affine(self.curve, x_3, y_3)

   def __eq__(self, other):
      return isinstance(other, Affine) and (self.x, self.y) == (other.x, other.y)

   def __hash__(self):
      return hash((self.x, self.y))

   def __getitem__(self, index):
      return [self.x, self.y][index]


class Infinity(CurvePoint):
   def isInfinity(self):
      return True

   def __neg__(self):
      return self

   def __str__(self):
      return "O"

   def __repr__(self):
      return "Infinity"

   def __add__(self, Q):
      self._checkCurve(Q)
      return Q

   def __eq__(self, other):
      return isinstance(other, Infinity)

   def __hash__(self):
      return hash("Infinity")


def point_add(P, Q):
   return P + Q


def point_negate(P):
   return -P


def point_mul(P, k):
   """The k-fold sum P + ... + P, with point_mul(P, 0) the identity.

   k must be a non-negative int; a negative k raises InvalidScalar.
   """
   return P * k
