# ! /usr/bin/env python
# -*- coding: utf-8 -*-
# ===================================================================
# elgamal.py
#
# 18.10.2026
#
# @desc: ElGamal ciphers over elliptic curve points. A cipher is the
#        pair [k*G, M + k*pk]; ciphers form an additive group that can
#        be multiplied by integers.
# ===================================================================


def zero_cipher(curve):
    """Neutral cipher [O, O]

    Args:
        curve (ECCobj): elliptic curve

    Returns:
        [ShortPoint, ShortPoint]
    """
    return [curve.identity, curve.identity]


def mul_cipher(a, b, curve):
    """Multiply cipher with integer

    Args:
        a (int): integer
        b ([ShortPoint, ShortPoint]): cipher
        curve (ECCobj): elliptic curve

    Returns:
        [ShortPoint, ShortPoint]: multiplied cipher
    """
    var0 = curve.multiplication(a, b[0])
    var1 = curve.multiplication(a, b[1])

    return [var0, var1]


def add_cipher(a, b, curve):
    """Add two ciphers

    Args:
        a ([ShortPoint, ShortPoint]): cipher
        b ([ShortPoint, ShortPoint]): cipher
        curve (ECCobj): elliptic curve

    Returns:
        [ShortPoint, ShortPoint]: added cipher
    """
    var0 = curve.addition(b[0], a[0])
    var1 = curve.addition(b[1], a[1])

    return [var0, var1]


def sub_cipher(a, b, curve):
    """Subtract cipher b from cipher a"""
    return [curve.subtraction(a[0], b[0]), curve.subtraction(a[1], b[1])]


def enc(curve, pubkey, message, k):
    """Mask curve point: Enc(message; k) = (k*G, message + k*pubkey)

    Args:
        curve (ECCobj): elliptic curve
        pubkey (ShortPoint): public key
        message (ShortPoint): curve point to mask
        k (int): masking value

    Returns:
        [ShortPoint, ShortPoint]: cipher
    """
    enc_a = curve.multiplication(k, curve.generator)
    enc_b = curve.addition(message, curve.multiplication(k, pubkey))
    return [enc_a, enc_b]


def remask(curve, pubkey, cipher, k):
    """Re-mask cipher: cipher + Enc(O; k)

    Args:
        curve (ECCobj): elliptic curve
        pubkey (ShortPoint): public key
        cipher ([ShortPoint, ShortPoint]): cipher
        k (int): masking value

    Returns:
        [ShortPoint, ShortPoint]: re-masked cipher
    """
    return add_cipher(cipher, enc(curve, pubkey, curve.identity, k), curve)


def dec(curve, seckey, cipher):
    """Unmask cipher with the secret key: c_2 - seckey*c_1

    Returns:
        ShortPoint: masked curve point
    """
    return curve.subtraction(cipher[1], curve.multiplication(seckey, cipher[0]))
