from .errors import DivisionByZero, InvalidFieldConfiguration
from .modp import IntegersModP
from .quadratic import QuadraticExtension
