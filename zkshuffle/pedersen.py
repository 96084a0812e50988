# ! /usr/bin/env python
# -*- coding: utf-8 -*-
# ===================================================================
# pedersen.py
#
# 18.10.2026
#
# @desc: Pedersen vector commitments
#        com_ck(a_1,...,a_n; r) = g_1*a_1 + ... + g_n*a_n + h*r
# ===================================================================
from zkshuffle.dot_product import DotProductCalculator
from zkshuffle.errors import LengthMismatchError


class CommitKey:
    """Commitment key ck = (g_1, ..., g_n; h)

    Attributes:
        generators (List[ShortPoint]): generators g_1,...,g_n
        blinding_generator (ShortPoint): generator h
    """
    def __init__(self, generators, blinding_generator):
        self.generators = list(generators)
        self.blinding_generator = blinding_generator

    def __len__(self):
        return len(self.generators)

    def __eq__(self, other):
        if not isinstance(other, CommitKey):
            return NotImplemented
        return (self.generators == other.generators and
                self.blinding_generator == other.blinding_generator)

    @classmethod
    def from_list(cls, gen):
        """Build key from the list [g_1, ..., g_n, h]"""
        return cls(gen[:-1], gen[-1])

    def to_list(self):
        """Returns:
            List[ShortPoint]: [g_1, ..., g_n, h]
        """
        return self.generators + [self.blinding_generator]

    @classmethod
    def generate(cls, curve, n):
        """Generate a key share G_i = k_i*curve.generator for n+1 random
        k_i. A single share is only binding towards parties that do not
        know the k_i, so every player contributes one and the shares are
        added with combine().

        Args:
            curve (ECCobj): elliptic curve
            n (int): number of generators g_i

        Returns:
            CommitKey, List[int]: key share and the secret scalars k_i
        """
        secret_keys = curve.rand_gen.get_random_array(n + 1)
        gen = [curve.multiplication(k, curve.generator) for k in secret_keys]
        return cls.from_list(gen), secret_keys

    def combine(self, curve, *others):
        """Add key shares point-wise

        Args:
            curve (ECCobj): elliptic curve
            *others (CommitKey): key shares of the other players

        Returns:
            CommitKey: combined key
        """
        var0 = self.to_list()
        for other in others:
            if len(other) != len(self):
                raise LengthMismatchError(
                    'commit key shares of size %d and %d' % (len(self),
                                                             len(other)))
            var0 = [curve.addition(a, b) for a, b in zip(var0,
                                                          other.to_list())]
        return CommitKey.from_list(var0)


class Pedersen:
    """Pedersen commitment: com_ck(a_1,...,a_n;r) = g_1*a_1+...+g_n*a_n+h*r
    with randomness r

    Attributes:
        curve (ECCobj): elliptic curve
        key (CommitKey): commitment key
    """
    def __init__(self, key, curve):
        """
        Args:
            key (CommitKey): commitment key
            curve (ECCobj): elliptic curve
        """
        self.curve = curve
        self.key = key

    def commit_vector(self, a_v, r):
        """Commit to n values in a_v with randomness r

        Args:
            a_v (List[int]): elements to commit to, len(a_v) == len(key)
            r (int): randomness

        Returns:
            ShortPoint: commitment
        """
        return commit_vector(self.curve, self.key, a_v, r)

    def commit_value(self, value, r):
        """Commitment com_ck(value, 0, ..., 0; r)

        Args:
            value (int): value for commitment
            r (int): randomness

        Returns:
            ShortPoint: commitment
        """
        var0 = self.curve.multiplication(value, self.key.generators[0])
        if r != 0:
            var1 = self.curve.multiplication(r, self.key.blinding_generator)
            var0 = self.curve.addition(var0, var1)
        return var0

    def commit_matrix(self, A_v, r_v):
        """Commit to m*n values with randomness r_v

        Args:
            A_v (List[List[int]]): m vectors with elements for commitment
            r_v (List[int]): m randomness values

        Returns:
            List[ShortPoint]: m commitments
        """
        if len(A_v) != len(r_v):
            raise LengthMismatchError(
                '%d rows but %d blinding values' % (len(A_v), len(r_v)))
        return [self.commit_vector(a_v, r) for a_v, r in zip(A_v, r_v)]


def commit_vector(curve, key, scalars, blinding):
    """com_ck(scalars; blinding) = blinding*h + sum(scalars_i*g_i)

    Args:
        curve (ECCobj): elliptic curve
        key (CommitKey): commitment key
        scalars (List[int]): vector to commit to
        blinding (int): randomness

    Returns:
        ShortPoint: commitment
    """
    if len(scalars) != len(key):
        raise LengthMismatchError(
            'commitment to %d values with a key of size %d' % (len(scalars),
                                                                len(key)))

    var0 = DotProductCalculator(curve).scalars_by_points(scalars,
                                                         key.generators)
    if blinding != 0:
        var1 = curve.multiplication(blinding, key.blinding_generator)
        var0 = curve.addition(var0, var1)
    return var0
