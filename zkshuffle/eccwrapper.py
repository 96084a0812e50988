# ! /usr/bin/env python
# -*- coding: utf-8 -*-
# ===================================================================
# eccwrapper.py
#
# 18.10.2026
#
# @desc: Group operations of a fastecdsa curve on plain affine points,
#        with an explicit neutral element, as consumed by commitments,
#        ciphers and the shuffle argument.
# ===================================================================
import fastecdsa.curve as curvelib
from fastecdsa.point import Point as FastecdsaPoint

from zkshuffle import random_generator
from zkshuffle.errors import ConfigError


class ShortPoint:
    """Affine point (x, y). The neutral element O is stored as (0, 1),
    which is never a point of a short Weierstrass curve with b != 1.

    Attributes:
        x (int): x coordinate
        y (int): y coordinate
    """
    x: int = None
    y: int = None

    def __init__(self, x=None, y=None):
        self.x = x
        self.y = y

    def __eq__(self, other):
        if not isinstance(other, ShortPoint):
            return NotImplemented

        return self.x == other.x and self.y == other.y

    def __hash__(self):
        return hash((self.x, self.y))

    def __repr__(self):
        return 'ShortPoint(%r, %r)' % (self.x, self.y)

    def is_identity(self):
        return self.x == 0 and self.y == 1


class Curve:
    """Interface every curve backend provides to the shuffle argument"""
    name = None
    order = None
    generator = None

    def __init__(self):
        raise NotImplementedError('Abstract method __init__')

    @property
    def identity(self):
        """Neutral element O"""
        return ShortPoint(0, 1)


class Fastecdsa(Curve):
    """Curve backend on top of fastecdsa.

    Attributes:
        _curve: fastecdsa.curve.Curve
        name (str): curve name
        generator (ShortPoint): base point G
        order (int): q, order of G and size of the scalar field
        rand_gen (RandomGenerator): scalars and permutations mod q
    """
    def __init__(self, curve):
        """
        Args:
            curve: fastecdsa.curve.Curve, e.g. fastecdsa.curve.secp256k1
        """
        self._curve = curve
        self.name = curve.name
        self.generator = ShortPoint(self._curve.gx, self._curve.gy)
        self.order = self._curve.q
        self.rand_gen = random_generator.RandomGenerator(self.order)

    @classmethod
    def from_name(cls, name):
        """Backend for a curve of fastecdsa.curve given by attribute name

        Args:
            name (str): e.g. 'secp256k1' or 'brainpoolP160r1'

        Returns:
            Fastecdsa
        """
        curve = getattr(curvelib, name, None)
        if not isinstance(curve, curvelib.Curve):
            raise ConfigError('unknown curve %r' % name)
        return cls(curve)

    def multiplication(self, k, P):
        """k*P for any integer k, negative values included

        Args:
            k (int): scalar, reduced mod q
            P (ShortPoint): point or O

        Returns:
            ShortPoint: k*P
        """
        k = k % self.order
        if k == 0 or P.is_identity():
            return self.identity
        product = k * self.shortpoint_to_point(P)
        return self.point_to_shortpoint(product)

    def addition(self, P, Q):
        """P+Q, O and P = -Q included

        Returns:
            ShortPoint: P+Q
        """
        if P.is_identity():
            return Q
        if Q.is_identity():
            return P
        if P.x == Q.x:
            if P.y != Q.y:
                return self.identity
            return self.multiplication(2, P)
        sum1 = self.shortpoint_to_point(P) + self.shortpoint_to_point(Q)
        return self.point_to_shortpoint(sum1)

    def subtraction(self, P, Q):
        """Returns:
            ShortPoint: P-Q
        """
        return self.addition(P, self.negation(Q))

    def negation(self, P):
        """Returns:
            ShortPoint: -P = (x, -y mod p)
        """
        if P.is_identity():
            return P
        return ShortPoint(P.x, (-P.y) % self._curve.p)

    def isoncurve(self, P):
        """Membership test for points received from other parties

        Args:
            P (ShortPoint): point to check, O counts as on curve

        Returns:
            bool: True if P satisfies the curve equation
        """
        if P.is_identity():
            return True
        return self._curve.is_point_on_curve((P.x, P.y))

    def shortpoint_to_point(self, P):
        """ShortPoint other than O -> fastecdsa.point.Point"""
        return FastecdsaPoint(P.x, P.y, self._curve)

    def point_to_shortpoint(self, point):
        """fastecdsa.point.Point -> ShortPoint, its identity element
        becomes O"""
        if point.curve is None:
            return self.identity
        return ShortPoint(int(point.x), int(point.y))
