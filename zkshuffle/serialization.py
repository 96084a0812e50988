# ! /usr/bin/env python
# -*- coding: utf-8 -*-
# ===================================================================
# serialization.py
#
# 18.10.2026
#
# @desc: JSON compatible encoding of shuffle proofs for transport.
#        Scalars become decimal strings, points [x, y] string pairs.
#        Decoding checks that every point lies on the curve.
# ===================================================================
import json

from zkshuffle.bayergroth import ShuffleProof
from zkshuffle.eccwrapper import ShortPoint
from zkshuffle.errors import SerializationError
from zkshuffle.multi_exponent_argument import Proof as MultiExpProof
from zkshuffle.product_argument import (ProductArgumentProof,
                                       HadamardProductProof,
                                       ZeroArgumentProof,
                                       SingleValueProductProof)


# --- scalars and points ---

def serialize_scalar(val):
    """int -> str"""
    return str(int(val))


def deserialize_scalar(s):
    """str -> int"""
    if not isinstance(s, str):
        raise SerializationError('scalar must be a string, got %r' % (s,))
    return int(s)


def serialize_point(point):
    """ShortPoint -> [str, str]"""
    return [str(point.x), str(point.y)]


def deserialize_point(data, curve):
    """[str, str] -> ShortPoint on curve"""
    if not isinstance(data, list) or len(data) != 2:
        raise SerializationError('point must be a pair, got %r' % (data,))
    point = ShortPoint(deserialize_scalar(data[0]),
                       deserialize_scalar(data[1]))
    if not curve.isoncurve(point):
        raise SerializationError('point %r is not on curve %s'
                                 % (point, curve.name))
    return point


def serialize_cipher(cipher):
    return [serialize_point(cipher[0]), serialize_point(cipher[1])]


def deserialize_cipher(data, curve):
    if not isinstance(data, list) or len(data) != 2:
        raise SerializationError('cipher must be a pair, got %r' % (data,))
    return [deserialize_point(data[0], curve),
            deserialize_point(data[1], curve)]


def _points(data, curve):
    return [deserialize_point(p, curve) for p in _list(data)]


def _scalars(data):
    return [deserialize_scalar(s) for s in _list(data)]


def _list(data):
    if not isinstance(data, list):
        raise SerializationError('expected a list, got %r' % (data,))
    return data


# --- product argument ---

def product_argument_to_dict(proof):
    svp = proof.single_value_proof
    var0 = {
        'single_value': {
            'gamma_commit': serialize_point(svp.gamma_commit),
            'delta_commit': serialize_point(svp.delta_commit),
            'Delta_commit': serialize_point(svp.Delta_commit),
            'gamma_tilde': [serialize_scalar(s) for s in svp.gamma_tilde],
            'alpha_tilde': [serialize_scalar(s) for s in svp.alpha_tilde],
            'r_gamma_tilde': serialize_scalar(svp.r_gamma_tilde),
            'r_alpha_tilde': serialize_scalar(svp.r_alpha_tilde),
        },
        'hadamard': None,
    }
    if proof.hadamard_proof is not None:
        zero = proof.hadamard_proof.zero_proof
        var0['hadamard'] = {
            'intermediate_commits': [serialize_point(p) for p in
                                     proof.hadamard_proof.intermediate_commits],
            'product_commit': serialize_point(
                proof.hadamard_proof.product_commit),
            'zero': {
                'a_0_commit': serialize_point(zero.a_0_commit),
                'b_m_commit': serialize_point(zero.b_m_commit),
                'P_commits': [serialize_point(p) for p in zero.P_commits],
                'f': [serialize_scalar(s) for s in zero.f],
                'r_f': serialize_scalar(zero.r_f),
                'h': [serialize_scalar(s) for s in zero.h],
                'r_h': serialize_scalar(zero.r_h),
                't_p': serialize_scalar(zero.t_p),
            },
        }
    return var0


def product_argument_from_dict(data, curve):
    svp = data['single_value']
    single_value_proof = SingleValueProductProof(
        deserialize_point(svp['gamma_commit'], curve),
        deserialize_point(svp['delta_commit'], curve),
        deserialize_point(svp['Delta_commit'], curve),
        _scalars(svp['gamma_tilde']),
        _scalars(svp['alpha_tilde']),
        deserialize_scalar(svp['r_gamma_tilde']),
        deserialize_scalar(svp['r_alpha_tilde']))

    hadamard_proof = None
    if data['hadamard'] is not None:
        zero = data['hadamard']['zero']
        zero_proof = ZeroArgumentProof(
            deserialize_point(zero['a_0_commit'], curve),
            deserialize_point(zero['b_m_commit'], curve),
            _points(zero['P_commits'], curve),
            _scalars(zero['f']),
            deserialize_scalar(zero['r_f']),
            _scalars(zero['h']),
            deserialize_scalar(zero['r_h']),
            deserialize_scalar(zero['t_p']))
        hadamard_proof = HadamardProductProof(
            _points(data['hadamard']['intermediate_commits'], curve),
            deserialize_point(data['hadamard']['product_commit'], curve),
            zero_proof)

    return ProductArgumentProof(hadamard_proof, single_value_proof)


# --- multi-exponentiation argument ---

def multi_exp_to_dict(proof):
    return {
        'a_0_commit': serialize_point(proof.a_0_commit),
        'b_commits': [serialize_point(p) for p in proof.b_commits],
        'diagonal_ciphers': [serialize_cipher(c) for c in
                             proof.diagonal_ciphers],
        'a_blinded': [serialize_scalar(s) for s in proof.a_blinded],
        'r_blinded': serialize_scalar(proof.r_blinded),
        'b_blinded': serialize_scalar(proof.b_blinded),
        's_blinded': serialize_scalar(proof.s_blinded),
        'tau_blinded': serialize_scalar(proof.tau_blinded),
    }


def multi_exp_from_dict(data, curve):
    return MultiExpProof(
        deserialize_point(data['a_0_commit'], curve),
        _points(data['b_commits'], curve),
        [deserialize_cipher(c, curve) for c in
         _list(data['diagonal_ciphers'])],
        _scalars(data['a_blinded']),
        deserialize_scalar(data['r_blinded']),
        deserialize_scalar(data['b_blinded']),
        deserialize_scalar(data['s_blinded']),
        deserialize_scalar(data['tau_blinded']))


# --- shuffle proof ---

def proof_to_dict(proof):
    """ShuffleProof -> dict of str, lists and dicts

    Args:
        proof (ShuffleProof): shuffle argument

    Returns:
        dict: JSON compatible representation
    """
    return {
        'pi_commit': [serialize_point(p) for p in proof.pi_commit],
        'exp_pi_commit': [serialize_point(p) for p in proof.exp_pi_commit],
        'product_argument': product_argument_to_dict(
            proof.product_argument_proof),
        'multi_exp': multi_exp_to_dict(proof.multi_exp_proof),
    }


def proof_from_dict(data, curve):
    """dict -> ShuffleProof

    Args:
        data (dict): output of proof_to_dict
        curve (ECCobj): curve the proof was made over

    Returns:
        ShuffleProof

    Raises:
        SerializationError: data is malformed or holds points off curve
    """
    try:
        return ShuffleProof(
            _points(data['pi_commit'], curve),
            _points(data['exp_pi_commit'], curve),
            product_argument_from_dict(data['product_argument'], curve),
            multi_exp_from_dict(data['multi_exp'], curve))
    except SerializationError:
        raise
    except (KeyError, TypeError, ValueError) as e:
        raise SerializationError('malformed shuffle proof: %s' % e) from e


def dumps(proof):
    """ShuffleProof -> JSON text"""
    return json.dumps(proof_to_dict(proof), sort_keys=True)


def loads(text, curve):
    """JSON text -> ShuffleProof"""
    try:
        data = json.loads(text)
    except ValueError as e:
        raise SerializationError('shuffle proof is not JSON: %s' % e) from e
    return proof_from_dict(data, curve)
