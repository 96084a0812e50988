# ! /usr/bin/env python
# -*- coding: utf-8 -*-
# ===================================================================
# proofs.py
#
# 18.10.2026
#
# @desc: Sigma protocols for single cards, non-interactive via the
#        Fiat-Shamir transcript: Schnorr proof of knowledge of a discrete
#        log (PoK) and the Chaum-Pedersen proof of equality of discrete
#        logs (PEQ). Re-masking and reveal statements are mapped onto the
#        PEQ statement shape.
# ===================================================================
import logging

from zkshuffle.dot_product import add_mod, mul_mod, sub_mod
from zkshuffle.elgamal import sub_cipher
from zkshuffle.transcript import Transcript

logger = logging.getLogger(__name__)


# Proof of knowledge -----------------------------------------------------------
class PokProver:
    """Prover for public = secret*generator

    Attributes:
        curve (ECCobj): elliptic curve
        generator (ShortPoint): base point
        public (ShortPoint): public point
        secret (int): discrete log of public
    """
    def __init__(self, curve, generator, public, secret):
        self.curve = curve
        self.generator = generator
        self.public = public
        self.secret = secret

    def pok_nizk(self):
        """Returns:
            List[ShortPoint, int]: commitment R = r*generator and opening
            r - c*secret
        """
        order = self.curve.order
        r = self.curve.rand_gen.get_random_value()
        var0 = self.curve.multiplication(r, self.generator)

        c = _pok_challenge(self.curve, self.generator, self.public, var0)
        opening = sub_mod(r, mul_mod(c, self.secret, order), order)

        return [var0, opening]


class PokVerifier:
    """Verifier for public = secret*generator"""
    def __init__(self, curve, generator, public):
        self.curve = curve
        self.generator = generator
        self.public = public

    def pok_nizk(self, commitment, opening):
        """Check opening*generator + c*public = commitment

        Args:
            commitment (ShortPoint): R
            opening (int): r - c*secret

        Returns:
            bool: True if proof is valid
        """
        c = _pok_challenge(self.curve, self.generator, self.public,
                           commitment)
        var0 = self.curve.multiplication(opening, self.generator)
        var1 = self.curve.multiplication(c, self.public)
        if self.curve.addition(var0, var1) != commitment:
            logger.warning('proof of knowledge rejected')
            return False
        return True


def _pok_challenge(curve, generator, public, commitment):
    transcript = Transcript(b'schnorr_identity')
    transcript.append(b'public_generator', generator)
    transcript.append(b'public_key', public)
    transcript.append(b'witness_commit', commitment)
    return transcript.challenge_scalar(b'c', curve.order)


# Proof of equality of discrete logs ------------------------------------------
class PeqProver:
    """Prover for DLEQ(G, A, H, B): A = x*G and B = x*H

    Attributes:
        curve (ECCobj): elliptic curve
        G (ShortPoint): first base
        A (ShortPoint): x*G
        H (ShortPoint): second base
        B (ShortPoint): x*H
        x (int): common discrete log
    """
    def __init__(self, curve, G, A, H, B, x):
        self.curve = curve
        self.G = G
        self.A = A
        self.H = H
        self.B = B
        self.x = x

    def peq_nizk(self):
        """Returns:
            List[int]: challenge c and response s = r + c*x
        """
        order = self.curve.order
        r = self.curve.rand_gen.get_random_value()
        var0 = self.curve.multiplication(r, self.G)
        var1 = self.curve.multiplication(r, self.H)

        c = _peq_challenge(self.curve, self.G, self.A, self.H, self.B, var0,
                           var1)
        s = add_mod(r, mul_mod(c, self.x, order), order)

        return [c, s]


class PeqVerifier:
    """Verifier for DLEQ(G, A, H, B)"""
    def __init__(self, curve, G, A, H, B):
        self.curve = curve
        self.G = G
        self.A = A
        self.H = H
        self.B = B

    def peq_nizk(self, c, s):
        """Recompute r*G = s*G - c*A, r*H = s*H - c*B and the challenge

        Args:
            c (int): challenge
            s (int): response

        Returns:
            bool: True if proof is valid
        """
        var0 = self.curve.subtraction(self.curve.multiplication(s, self.G),
                                      self.curve.multiplication(c, self.A))
        var1 = self.curve.subtraction(self.curve.multiplication(s, self.H),
                                      self.curve.multiplication(c, self.B))
        if c != _peq_challenge(self.curve, self.G, self.A, self.H, self.B,
                               var0, var1):
            logger.warning('proof of equal discrete logs rejected')
            return False
        return True


def _peq_challenge(curve, G, A, H, B, commit_G, commit_H):
    transcript = Transcript(b'chaum_pedersen')
    transcript.append(b'bases', [G, H])
    transcript.append(b'statement', [A, B])
    transcript.append(b'witness_commits', [commit_G, commit_H])
    return transcript.challenge_scalar(b'c', curve.order)


# Card statements -------------------------------------------------------------
def remask_statement(curve, public_key, cipher, remasked):
    """Map remasked = cipher + Enc(O; k) onto DLEQ(G, k*G, pk, k*pk)

    Args:
        curve (ECCobj): elliptic curve
        public_key (ShortPoint): masking public key
        cipher ([ShortPoint, ShortPoint]): cipher before re-masking
        remasked ([ShortPoint, ShortPoint]): cipher after re-masking

    Returns:
        (ShortPoint, ShortPoint, ShortPoint, ShortPoint): G, A, H, B
    """
    var0 = sub_cipher(remasked, cipher, curve)
    return curve.generator, var0[0], public_key, var0[1]


def reveal_statement(curve, public_key_share, cipher, token):
    """Map token = sk*c_1 with pk_share = sk*G onto
    DLEQ(c_1, token, G, pk_share)

    Args:
        curve (ECCobj): elliptic curve
        public_key_share (ShortPoint): public key share of the player
        cipher ([ShortPoint, ShortPoint]): masked card
        token (ShortPoint): reveal token of the player

    Returns:
        (ShortPoint, ShortPoint, ShortPoint, ShortPoint): G, A, H, B
    """
    return cipher[0], token, curve.generator, public_key_share
