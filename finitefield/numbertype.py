
# memoize calls to the class constructors for fields
# this helps typechecking by never creating two separate
# instances of a number class.
def memoize(f):
   cache = {}

   def memoizedFunction(*args, **kwargs):
      argTuple = args + tuple(sorted(kwargs.items()))
      if argTuple not in cache:
         cache[argTuple] = f(*args, **kwargs)
      return cache[argTuple]

   memoizedFunction.cache = cache
   memoizedFunction.__name__ = f.__name__
   memoizedFunction.__doc__ = f.__doc__
   return memoizedFunction


# type check a binary operation, and silently typecast ints
# (and elements of a subfield) into the type of self
def typecheck(f):
   def newF(self, other):
      if (hasattr(other.__class__, 'operatorPrecedence') and
            other.__class__.operatorPrecedence > self.__class__.operatorPrecedence):
         return NotImplemented

      if type(self) is not type(other):
         try:
            other = self.__class__(other)
         except TypeError:
            message = 'Not able to typecast %s of type %s to type %s in function %s'
            raise TypeError(message % (other, type(other).__name__, type(self).__name__, f.__name__))

      return f(self, other)

   newF.__name__ = f.__name__
   return newF


# require a subclass to implement +-* neg and to perform typechecks on all of
# the binary operations finally, the __init__ must operate when given a single
# argument, provided that argument is the int zero or one
class DomainElement(object):
   operatorPrecedence = 1

   # the 'r'-operators are only used when typecasting ints
   def __radd__(self, other): return self + other
   def __rsub__(self, other): return -self + other
   def __rmul__(self, other): return self * other

   # square-and-multiply
   def __pow__(self, n):
      if not isinstance(n, int):
         raise TypeError("Can't raise %s to a non-integer power" % type(self).__name__)

      if n < 0:
         return self.inverse() ** (-n)

      Q = self
      R = self if n & 1 else self.__class__(1)

      i = 2
      while i <= n:
         Q = Q * Q

         if n & i == i:
            R = Q * R

         i = i << 1

      return R


# additionally require inverse() on subclasses
class FieldElement(DomainElement):
   @typecheck
   def __truediv__(self, other): return self * other.inverse()
   def __rtruediv__(self, other): return self.inverse() * other
