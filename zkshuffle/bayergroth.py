# ! /usr/bin/env python
# -*- coding: utf-8 -*-
# ===================================================================
# bayergroth.py
#
# 18.10.2026
#
# @desc: Zero-Knowledge Argument for Correctness of a Shuffle by Stephanie
#        Bayer and Jens Groth to prove that: ciphers_out[i] = ciphers_in[pi[
#        i]] + Enc_pk(O, rho[i]). Non-interactive via the Fiat-Shamir
#        transcript; the product argument shows that the committed values
#        are a permutation of 0, ... , N-1, the multi-exponentiation
#        argument ties the permutation to the ciphers.
# ===================================================================
import logging

from zkshuffle.dot_product import (add_mod, mul_mod, sub_mod, neg_mod,
                                   exp_mod, chunks)
from zkshuffle.errors import LengthMismatchError, VerificationError
from zkshuffle.multi_exponent_argument import Prover as MultiExpProver
from zkshuffle.multi_exponent_argument import Statement as MultiExpStatement
from zkshuffle.multi_exponent_argument import Witness as MultiExpWitness
from zkshuffle.product_argument import ProductArgumentProver
from zkshuffle.transcript import Transcript

logger = logging.getLogger(__name__)


class ShuffleStatement:
    """Public input of the shuffle argument

    Attributes:
        ciphers_in (List[[ShortPoint, ShortPoint]]): ciphers before the
            permutation and re-masking
        ciphers_out (List[[ShortPoint, ShortPoint]]): ciphers after the
            permutation and re-masking
    """
    def __init__(self, ciphers_in, ciphers_out):
        self.ciphers_in = ciphers_in
        self.ciphers_out = ciphers_out


class ShuffleWitness:
    """Secret of the shuffling player, never leaves the prover

    Attributes:
        permutation (List[int]): pi with ciphers_out[i] = ciphers_in[pi[i]]
            + Enc(O; rho[i])
        masking_factors (List[int]): rho
    """
    def __init__(self, permutation, masking_factors):
        self.permutation = permutation
        self.masking_factors = masking_factors


def identity_product(x, y, z, size, order):
    """b = prod_{i=0}^{size-1}(i*y + x^i - z), the value every permutation
    of 0, ... , size-1 reaches

    Args:
        x (int): challenge
        y (int): challenge
        z (int): challenge
        size (int): number of cards
        order (int): order of elliptic curve subgroup

    Returns:
        int: b
    """
    var0 = 1
    x_i = 1
    for i in range(size):
        var1 = add_mod(mul_mod(i, y, order), x_i, order)
        var0 = mul_mod(var0, sub_mod(var1, z, order), order)
        x_i = mul_mod(x_i, x, order)
    return var0


def d_minus_z_commitments(config, pi_commit, exp_pi_commit, y, z):
    """y*c_A + c_B + com_ck(-z, ... , -z; 0) for every row

    Returns:
        List[ShortPoint]: commitments to the rows of y*a + b - z
    """
    curve = config.curve
    minus_z = config.pedersen.commit_vector([neg_mod(z, curve.order)] *
                                            config.n, 0)
    var0 = []
    for c_a, c_b in zip(pi_commit, exp_pi_commit):
        var1 = curve.addition(curve.multiplication(y, c_a), c_b)
        var0.append(curve.addition(var1, minus_z))
    return var0


def exponentiated_input(config, ciphers_in, x):
    """C = sum_j(x^j * ciphers_in[j])"""
    powers_of_x = [exp_mod(x, j, config.curve.order)
                   for j in range(len(ciphers_in))]
    return config.calculator.scalars_by_ciphers(powers_of_x, ciphers_in)


def _append_public(transcript, config, statement):
    transcript.append(b'commit_key', config.commit_key)
    transcript.append(b'public_key', config.public_key)
    transcript.append(b'ciphers_in', statement.ciphers_in)
    transcript.append(b'ciphers_out', statement.ciphers_out)


class BayGroProver:
    """Prover in Zero-Knowledge Argument for Correctness of a Shuffle such
    that ciphers_out[i] = ciphers_in[pi[i]] + Enc_pk(O, rho[i])

    """
    def __init__(self, config, statement, witness):
        """
        Args:
            config (PublicConfig): curve, public key, commit key, m and n
            statement (ShuffleStatement): ciphers before and after
            witness (ShuffleWitness): permutation and masking factors
        """
        N = config.N
        for name, values in (('ciphers_in', statement.ciphers_in),
                             ('ciphers_out', statement.ciphers_out),
                             ('permutation', witness.permutation),
                             ('masking_factors', witness.masking_factors)):
            if len(values) != N:
                raise LengthMismatchError('%s holds %d entries, expected %d'
                                          % (name, len(values), N))

        self.config = config
        self.statement = statement
        self.witness = witness

    def prove(self, transcript=None):
        """Non-interactive shuffle argument

        Args:
            transcript (Transcript): continued by a fork, a new transcript
                is started if None

        Returns:
            ShuffleProof
        """
        config = self.config
        curve = config.curve
        order = curve.order
        pi = self.witness.permutation
        rho = self.witness.masking_factors

        transcript = Transcript() if transcript is None else transcript.fork()
        _append_public(transcript, config, self.statement)

        A = chunks([p % order for p in pi], config.n)
        r_A = curve.rand_gen.get_random_array(config.m)
        pi_commit = config.pedersen.commit_matrix(A, r_A)
        transcript.append(b'pi_commit', pi_commit)
        x = transcript.challenge_scalar(b'x', order)

        exp_pi = [exp_mod(x, p, order) for p in pi]
        B = chunks(exp_pi, config.n)
        r_B = curve.rand_gen.get_random_array(config.m)
        exp_pi_commit = config.pedersen.commit_matrix(B, r_B)
        transcript.append(b'exp_pi_commit', exp_pi_commit)
        y = transcript.challenge_scalar(b'y', order)
        z = transcript.challenge_scalar(b'z', order)

        # D - Z = y*A + B - z
        D = []
        r_D = []
        for i in range(config.m):
            D.append([sub_mod(add_mod(mul_mod(y, a, order), b, order), z, order)
                      for a, b in zip(A[i], B[i])])
            r_D.append(add_mod(mul_mod(y, r_A[i], order), r_B[i], order))
        d_minus_z_commit = d_minus_z_commitments(config, pi_commit,
                                                 exp_pi_commit, y, z)

        b = identity_product(x, y, z, config.N, order)
        transcript.append(b'b', b)

        product_argument_proof = ProductArgumentProver(
            config, d_minus_z_commit, D, r_D, b).prove(transcript.fork())

        product = exponentiated_input(config, self.statement.ciphers_in, x)
        transcript.append(b'multi_exp_claim', product)

        ro = 0
        for rho_i, b_i in zip(rho, exp_pi):
            ro = sub_mod(ro, mul_mod(rho_i, b_i, order), order)
        statement = MultiExpStatement(chunks(self.statement.ciphers_out,
                                             config.n),
                                      product, exp_pi_commit)
        witness = MultiExpWitness(B, r_B, ro)
        multi_exp_proof = MultiExpProver(config.multi_exp_parameters(),
                                         statement, witness).prove(
                                             transcript.fork())

        logger.debug('shuffle argument for %d cards (%dx%d)', config.N,
                     config.m, config.n)
        return ShuffleProof(pi_commit, exp_pi_commit, product_argument_proof,
                            multi_exp_proof)


class ShuffleProof:
    """
    Attributes:
        pi_commit (List[ShortPoint]): row commitments to the permutation
        exp_pi_commit (List[ShortPoint]): row commitments to x^pi(i)
        product_argument_proof (ProductArgumentProof): permutation proof
        multi_exp_proof (multi_exponent_argument.Proof): re-masking proof
    """
    def __init__(self, pi_commit, exp_pi_commit, product_argument_proof,
                 multi_exp_proof):
        self.pi_commit = pi_commit
        self.exp_pi_commit = exp_pi_commit
        self.product_argument_proof = product_argument_proof
        self.multi_exp_proof = multi_exp_proof

    def verify(self, config, statement, transcript=None):
        """Replay the transcript and check both sub-arguments

        Args:
            config (PublicConfig): public parameters
            statement (ShuffleStatement): ciphers before and after
            transcript (Transcript): continued by a fork, a new transcript
                is started if None

        Raises:
            VerificationError: proof rejected
        """
        curve = config.curve
        order = curve.order

        if (len(statement.ciphers_in) != config.N or
                len(statement.ciphers_out) != config.N):
            raise VerificationError('statement does not hold %d ciphers'
                                    % config.N)
        if (len(self.pi_commit) != config.m or
                len(self.exp_pi_commit) != config.m):
            raise VerificationError('expected %d row commitments' % config.m)

        transcript = Transcript() if transcript is None else transcript.fork()
        _append_public(transcript, config, statement)

        transcript.append(b'pi_commit', self.pi_commit)
        x = transcript.challenge_scalar(b'x', order)
        transcript.append(b'exp_pi_commit', self.exp_pi_commit)
        y = transcript.challenge_scalar(b'y', order)
        z = transcript.challenge_scalar(b'z', order)

        d_minus_z_commit = d_minus_z_commitments(config, self.pi_commit,
                                                 self.exp_pi_commit, y, z)
        b = identity_product(x, y, z, config.N, order)
        transcript.append(b'b', b)

        self.product_argument_proof.verify(config, b, d_minus_z_commit,
                                           transcript.fork())

        product = exponentiated_input(config, statement.ciphers_in, x)
        transcript.append(b'multi_exp_claim', product)

        multi_exp_statement = MultiExpStatement(
            chunks(statement.ciphers_out, config.n), product,
            self.exp_pi_commit)
        self.multi_exp_proof.verify(config.multi_exp_parameters(),
                                    multi_exp_statement, transcript.fork())

        logger.debug('shuffle argument for %d cards accepted', config.N)


class BayGroVerifier:
    """Verifier in Zero-Knowledge Argument for Correctness of a Shuffle"""
    def __init__(self, config, statement):
        """
        Args:
            config (PublicConfig): public parameters
            statement (ShuffleStatement): ciphers before and after
        """
        self.config = config
        self.statement = statement

    def verify(self, proof, transcript=None):
        """
        Args:
            proof (ShuffleProof): shuffle argument
            transcript (Transcript): optional transcript to continue

        Returns:
            bool: True if proof is valid
        """
        try:
            proof.verify(self.config, self.statement, transcript)
        except VerificationError as e:
            logger.warning('shuffle proof rejected: %s', e)
            return False
        return True
