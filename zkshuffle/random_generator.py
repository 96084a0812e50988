# ! /usr/bin/env python
# -*- coding: utf-8 -*-
# ===================================================================
# random_generator.py
#
# 18.10.2026
#
# @desc: Prover randomness: blinding factors, masking values and
#        permutations, drawn from the secrets module.
# ===================================================================
import secrets


class RandomGenerator:
    """Uniform scalars of the curve's scalar field and uniform
    permutations of card positions.

    Attributes:
        order (int): order of the elliptic curve subgroup
    """

    def __init__(self, order):
        self.order = order

    def get_random_value(self):
        """Returns:
            int: uniform non-zero scalar from [1, order)
        """
        return 1 + secrets.randbelow(self.order - 1)

    @staticmethod
    def get_random_value_range(low, high):
        """Uniform integer from [low, high)"""
        return low + secrets.randbelow(high - low)

    def get_random_array(self, size):
        """Blinding vector of size non-zero scalars

        Args:
            size (int): length, may be 0

        Returns:
            List[int]: scalars from [1, order)
        """
        return [self.get_random_value() for _ in range(size)]

    def get_random_matrix(self, rows, cols):
        """Returns:
            List[List[int]]: rows x cols non-zero scalars
        """
        return [self.get_random_array(cols) for _ in range(rows)]

    def get_random_permutation(self, size):
        """Fisher-Yates shuffle of the positions 0, ... , size-1

        Args:
            size (int): number of cards

        Returns:
            List[int]: pi with pi[i] the position card i is taken from
        """
        pi = list(range(size))

        for i in range(size - 1):
            j = self.get_random_value_range(i, size)
            pi[i], pi[j] = pi[j], pi[i]

        return pi
