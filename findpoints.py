#| # Points and torsion points of an elliptic curve over F_{p^2}
#| Everything here is a brute-force search: there are p^2 candidate x's and
#| p^2 candidate y's for each, and the torsion search multiplies every point
#| found. That is fine for F_25 and hopeless for anything of real size.
import logging
import sys

from curveconfig import DEFAULT_CONFIG, build_curve
from elliptic import InvalidScalar

logger = logging.getLogger(__name__)


def enumerate_field_elements(field):
   return list(field.elements())


def enumerate_curve_points(curve):
   """All points of the curve, affine points ordered by (x, y), then Infinity."""
   xs = enumerate_field_elements(curve.field)
   ys = xs

   points = []
   for x in xs:
      rhs = curve.rhs(x)
      points.extend(curve.point(x, y) for y in ys if y*y == rhs)

   points.append(curve.infinity())
   logger.debug("Found %d points on %s", len(points), curve)
   return points


def curve_point_count(curve):
   return len(enumerate_curve_points(curve))


def find_full_r_torsion_points(curve, r):
   """Every point P with rP = O, in the order of enumerate_curve_points."""
   if isinstance(r, bool) or not isinstance(r, int):
      raise TypeError("The torsion order must be an int, got %s" % type(r).__name__)
   if r <= 0:
      raise InvalidScalar("The torsion order must be positive, got %d" % r)

   torsion = [P for P in enumerate_curve_points(curve) if (P * r).isInfinity()]
   logger.debug("Found %d %d-torsion points", len(torsion), r)
   return torsion


def main(argv):
   if len(argv) > 2:
      print("usage: python findpoints.py [r]")
      return 2

   try:
      r = int(argv[1]) if len(argv) == 2 else 3
   except ValueError:
      print("usage: python findpoints.py [r]")
      return 2

   try:
      curve = build_curve(DEFAULT_CONFIG)
      field = curve.field

      print('Elements of F(%d^2):' % field.p)
      for elem in enumerate_field_elements(field):
         print(elem)

      print('\nPoints on the elliptic curve %s:' % curve)
      for point in enumerate_curve_points(curve):
         print(point)

      torsion = find_full_r_torsion_points(curve, r)
   except (ValueError, ZeroDivisionError) as e:
      print('Error: %s' % e)
      return 1

   print('\nFull %d-torsion points on the curve:' % r)
   for point in torsion:
      print(point)

   return 0


if __name__ == '__main__':
   logging.basicConfig(level=logging.INFO)
   sys.exit(main(sys.argv))
