# ! /usr/bin/env python
# -*- coding: utf-8 -*-
# ===================================================================
# dot_product.py
#
# 18.10.2026
#
# @desc: Linear algebra over the scalar field and the curve: dot
#        products of scalars with scalars, points and ciphers, modular
#        helpers, Hadamard products and the bilinear map used by the
#        zero argument.
# ===================================================================
from zkshuffle.elgamal import add_cipher, mul_cipher, zero_cipher
from zkshuffle.errors import DotProductLenError


class DotProductCalculator:
    """Dot products sum(a_i * b_i) under the field, point and cipher
    operations of one curve.

    Attributes:
        curve (ECCobj): elliptic curve
    """
    def __init__(self, curve):
        self.curve = curve

    def scalars_by_scalars(self, scalars_a, scalars_b):
        """Args:
            scalars_a (List[int]): scalars
            scalars_b (List[int]): scalars

        Returns:
            int: sum(a_i * b_i) mod order
        """
        if len(scalars_a) != len(scalars_b):
            raise DotProductLenError(
                'dot product of %d and %d scalars' % (len(scalars_a),
                                                      len(scalars_b)))

        var0 = 0
        for a, b in zip(scalars_a, scalars_b):
            var0 = (var0 + a * b) % self.curve.order
        return var0

    def scalars_by_points(self, scalars, points):
        """Multi-scalar multiplication

        Args:
            scalars (List[int]): scalars
            points (List[ShortPoint]): elliptic curve points

        Returns:
            ShortPoint: sum(scalars_i * points_i)
        """
        if len(scalars) != len(points):
            raise DotProductLenError(
                'dot product of %d scalars and %d points' % (len(scalars),
                                                             len(points)))

        var0 = self.curve.identity
        for scalar, point in zip(scalars, points):
            var1 = self.curve.multiplication(scalar, point)
            var0 = self.curve.addition(var0, var1)
        return var0

    def scalars_by_ciphers(self, scalars, ciphers):
        """Args:
            scalars (List[int]): scalars
            ciphers (List[[ShortPoint, ShortPoint]]): ciphers

        Returns:
            [ShortPoint, ShortPoint]: sum(scalars_i * ciphers_i)
        """
        if len(scalars) != len(ciphers):
            raise DotProductLenError(
                'dot product of %d scalars and %d ciphers' % (len(scalars),
                                                              len(ciphers)))

        var0 = zero_cipher(self.curve)
        for scalar, cipher in zip(scalars, ciphers):
            var1 = mul_cipher(scalar, cipher, self.curve)
            var0 = add_cipher(var0, var1, self.curve)
        return var0


def add_mod(a: int, b: int, order: int) -> int:
    return (a + b) % order


def mul_mod(a: int, b: int, order: int) -> int:
    return (a * b) % order


def exp_mod(a: int, b: int, order: int) -> int:
    return pow(a, b, order)


def sub_mod(a: int, b: int, order: int) -> int:
    return (a - b) % order


def neg_mod(a: int, order: int) -> int:
    return (-a) % order


def powers(x, count, order):
    """[1, x, x^2, ..., x^(count-1)] mod order"""
    var0 = [1]
    for i in range(1, count):
        var0.append(mul_mod(var0[i - 1], x, order))
    return var0[:count]


def scale_vector(k, a_v, order):
    """k * a_v entry-wise"""
    return [mul_mod(k, a, order) for a in a_v]


def add_vectors(a_v, b_v, order):
    """a_v + b_v entry-wise"""
    return [add_mod(a, b, order) for a, b in zip(a_v, b_v)]


def chunks(values, n):
    """Split values into rows of n entries"""
    return [values[n * i: n * (i + 1)] for i in range(len(values) // n)]


def hadamard(A, order):
    """Calculate cumulative Hadamard products: b_0 = A[0], b_1 = A[0]*A[1],
    ..., b_m = A[0]*A[1]*...*A[m]

    Args:
        A (List[List[int]]): matrix with m rows of n elements
        order (int): order of elliptic curve subgroup

    Returns:
        List[List[int]]: Hadamard products, last row is the product of
        all rows
    """
    var0 = [list(A[0])]
    for i in range(1, len(A)):
        var0.append([mul_mod(a, b, order) for a, b in zip(A[i], var0[i - 1])])

    return var0


def bilinearmap(f, h, y, order):
    """f *_y h = sum_{j=1}^{n}(f_j*h_j*y^j), the bilinear map of the zero
    argument

    Args:
        f (List[int]): left operand
        h (List[int]): right operand
        y (int): challenge
        order (int): order of elliptic curve subgroup

    Returns:
        int: f *_y h mod order
    """
    if len(f) != len(h):
        raise DotProductLenError(
            'bilinear map of %d and %d scalars' % (len(f), len(h)))

    var0 = 0
    y_j = 1
    for f_j, h_j in zip(f, h):
        y_j = mul_mod(y_j, y, order)
        var0 = add_mod(var0, f_j * h_j * y_j, order)

    return var0
