# ! /usr/bin/env python
# -*- coding: utf-8 -*-
# ===================================================================
# config.py
#
# 18.10.2026
#
# @desc: Public parameters shared by prover and verifier of a shuffle:
#        curve, public key, commitment key and the m x n layout of the
#        deck.
# ===================================================================
from zkshuffle.dot_product import DotProductCalculator
from zkshuffle.errors import ConfigError
from zkshuffle.multi_exponent_argument import Parameters
from zkshuffle.pedersen import Pedersen

# card indices are exponents x^i; they have to fit into 64 bit
MAX_DECK_SIZE = 2 ** 64


class PublicConfig:
    """Public parameters of the shuffle argument, read-only after
    construction.

    Attributes:
        curve (ECCobj): elliptic curve
        public_key (ShortPoint): masking public key
        commit_key (CommitKey): n generators and blinding generator
        m (int): rows
        n (int): columns
        N (int): number of cards N=m*n
        pedersen (Pedersen): commitment scheme over commit_key
        calculator (DotProductCalculator): dot products over curve
    """
    def __init__(self, curve, public_key, commit_key, m, n):
        """
        Args:
            curve (ECCobj): elliptic curve
            public_key (ShortPoint): masking public key
            commit_key (CommitKey): commitment key with n generators
            m (int): rows
            n (int): columns
        """
        if m < 1:
            raise ConfigError('m has to be positive, got %d' % m)
        if n < 2:
            raise ConfigError('n has to be at least 2, got %d' % n)
        if len(commit_key) != n:
            raise ConfigError('commit key has %d generators, expected %d'
                              % (len(commit_key), n))
        if m * n > MAX_DECK_SIZE:
            raise ConfigError('%d cards exceed the 64 bit index space'
                              % (m * n))
        if m * n >= curve.order:
            raise ConfigError('%d cards exceed the scalar field' % (m * n))
        if not curve.isoncurve(public_key):
            raise ConfigError('public key is not on curve %s' % curve.name)

        self.curve = curve
        self.public_key = public_key
        self.commit_key = commit_key
        self.m = m
        self.n = n
        self.N = m * n

        self.pedersen = Pedersen(commit_key, curve)
        self.calculator = DotProductCalculator(curve)

    def multi_exp_parameters(self):
        """Returns:
            Parameters: parameters of the multi-exponentiation argument
        """
        return Parameters(self.curve, self.public_key, self.commit_key)
