# ! /usr/bin/env python
# -*- coding: utf-8 -*-
# ===================================================================
# multi_exponent_argument.py
#
# 18.10.2026
#
# @desc: Multi-exponentiation argument of Bayer and Groth. Proves for
#        ciphers C_1, ..., C_m (rows of n ciphers), committed exponent
#        rows a_1, ..., a_m and a claimed product C that
#        C = Enc(O; ro) + sum_i <a_i, C_i>.
#        The bilinear form is split into 2m diagonal sums, each costing
#        O(n) group operations.
# ===================================================================
import logging

from zkshuffle.dot_product import (DotProductCalculator, add_mod, mul_mod,
                                   powers, scale_vector, add_vectors)
from zkshuffle.elgamal import add_cipher, zero_cipher
from zkshuffle.errors import LengthMismatchError, VerificationError
from zkshuffle.pedersen import Pedersen

logger = logging.getLogger(__name__)


class Parameters:
    """Public parameters of the multi-exponentiation argument

    Attributes:
        curve (ECCobj): elliptic curve
        public_key (ShortPoint): masking public key
        commit_key (CommitKey): commitment key, one generator per column
        masking_generator (ShortPoint): base for the scalars b_k hidden in
            the diagonal ciphers
    """
    def __init__(self, curve, public_key, commit_key, masking_generator=None):
        self.curve = curve
        self.public_key = public_key
        self.commit_key = commit_key
        if masking_generator is None:
            masking_generator = curve.generator
        self.masking_generator = masking_generator

        self.pedersen = Pedersen(commit_key, curve)
        self.calculator = DotProductCalculator(curve)

    def encrypt(self, value, k):
        """Enc(value*H; k) = (k*G, value*H + k*pk) with H the masking
        generator

        Args:
            value (int): scalar to hide
            k (int): masking value

        Returns:
            [ShortPoint, ShortPoint]: cipher
        """
        enc_a = self.curve.multiplication(k, self.curve.generator)
        var0 = self.curve.multiplication(value, self.masking_generator)
        var1 = self.curve.multiplication(k, self.public_key)
        return [enc_a, self.curve.addition(var0, var1)]


class Witness:
    """Secret exponents of the prover

    Attributes:
        matrix_a (List[List[int]]): m rows of n exponents
        matrix_blinders (List[int]): commitment randomness per row
        ro (int): masking value of Enc(O; ro)
    """
    def __init__(self, matrix_a, matrix_blinders, ro):
        self.matrix_a = matrix_a
        self.matrix_blinders = matrix_blinders
        self.ro = ro


class Statement:
    """
    Attributes:
        shuffled_ciphers (List[List[[ShortPoint, ShortPoint]]]): m rows of
            n ciphers
        product ([ShortPoint, ShortPoint]): claimed product cipher
        commitments_to_exponents (List[ShortPoint]): commitment per row of
            the exponent matrix
    """
    def __init__(self, shuffled_ciphers, product, commitments_to_exponents):
        self.shuffled_ciphers = shuffled_ciphers
        self.product = product
        self.commitments_to_exponents = commitments_to_exponents

    @property
    def m(self):
        return len(self.shuffled_ciphers)

    @property
    def n(self):
        return len(self.shuffled_ciphers[0])


def diagonals_from_chunks(calculator, cipher_chunks, scalar_chunks,
                          claimed_product, a_0_randomness):
    """Diagonal sums E_0, ..., E_{2m-1} of the bilinear form
    sum_{i,j} <scalar_chunks[j], cipher_chunks[i]> with the random row
    a_0 prepended to the scalar rows. E_k collects all pairs with
    k = m - (i+1) + j, so the centre E_m is the claimed product itself and
    is never recomputed.

    Args:
        calculator (DotProductCalculator): dot products over the curve
        cipher_chunks (List[List[[ShortPoint, ShortPoint]]]): m rows of n
            ciphers
        scalar_chunks (List[List[int]]): m rows of n scalars
        claimed_product ([ShortPoint, ShortPoint]): centre diagonal
        a_0_randomness (List[int]): random row a_0

    Returns:
        List[[ShortPoint, ShortPoint]]: 2m diagonal sums
    """
    m = len(cipher_chunks)
    if len(scalar_chunks) != m:
        raise LengthMismatchError('%d cipher rows but %d scalar rows'
                                  % (m, len(scalar_chunks)))
    curve = calculator.curve

    num_of_diagonals = 2 * m - 1
    center = num_of_diagonals // 2
    diagonal_sums = [zero_cipher(curve) for _ in range(num_of_diagonals)]

    for d in range(1, m):
        additional_randomness = calculator.scalars_by_ciphers(
            a_0_randomness, cipher_chunks[d - 1])
        upper = zero_cipher(curve)
        lower = zero_cipher(curve)
        for i in range(d, m):
            var0 = calculator.scalars_by_ciphers(scalar_chunks[i - d],
                                                 cipher_chunks[i])
            upper = add_cipher(upper, var0, curve)

            var1 = calculator.scalars_by_ciphers(scalar_chunks[i],
                                                 cipher_chunks[i - d])
            lower = add_cipher(lower, var1, curve)

        diagonal_sums[center - d] = add_cipher(upper, additional_randomness,
                                               curve)
        diagonal_sums[center + d] = lower

    diagonal_sums[center] = claimed_product

    zeroth_diagonal = calculator.scalars_by_ciphers(a_0_randomness,
                                                    cipher_chunks[-1])
    diagonal_sums.insert(0, zeroth_diagonal)

    return diagonal_sums


def _append_statement(transcript, parameters, statement):
    transcript.append(b'multi_exp_commit_key', parameters.commit_key)
    transcript.append(b'multi_exp_public_key', parameters.public_key)
    transcript.append(b'multi_exp_masking_generator',
                      parameters.masking_generator)
    transcript.append(b'multi_exp_ciphers', statement.shuffled_ciphers)
    transcript.append(b'multi_exp_product', statement.product)
    transcript.append(b'multi_exp_commitments',
                      statement.commitments_to_exponents)


def _append_commitments(transcript, a_0_commit, b_commits, diagonal_ciphers):
    transcript.append(b'multi_exp_a_0_commit', a_0_commit)
    transcript.append(b'multi_exp_b_commits', b_commits)
    transcript.append(b'multi_exp_diagonals', diagonal_ciphers)


class Prover:
    """Prover in the multi-exponentiation argument"""
    def __init__(self, parameters, statement, witness):
        """
        Args:
            parameters (Parameters): public parameters
            statement (Statement): ciphers, product and commitments
            witness (Witness): exponents, blinders and ro
        """
        self.parameters = parameters
        self.statement = statement
        self.witness = witness

        self.m = statement.m
        self.n = statement.n
        if len(witness.matrix_a) != self.m:
            raise LengthMismatchError('%d exponent rows for %d cipher rows'
                                      % (len(witness.matrix_a), self.m))
        if len(witness.matrix_blinders) != self.m:
            raise LengthMismatchError('%d blinders for %d rows'
                                      % (len(witness.matrix_blinders),
                                         self.m))

    def prove(self, transcript):
        """Commit to the random row a_0, the scalars b_k and the diagonal
        ciphers E_k, then answer the challenge x with the folded openings.

        Args:
            transcript (Transcript): transcript, mutated

        Returns:
            Proof
        """
        curve = self.parameters.curve
        order = curve.order
        pedersen = self.parameters.pedersen
        calculator = self.parameters.calculator
        m = self.m

        a_0 = curve.rand_gen.get_random_array(self.n)
        r_0 = curve.rand_gen.get_random_value()

        # the centre scalar and its randomness are 0, the centre masking
        # value is ro so that E_m equals the claimed product
        b = curve.rand_gen.get_random_array(2 * m)
        b[m] = 0
        s = curve.rand_gen.get_random_array(2 * m)
        s[m] = 0
        tau = curve.rand_gen.get_random_array(2 * m)
        tau[m] = self.witness.ro % order

        a_0_commit = pedersen.commit_vector(a_0, r_0)
        b_commits = [pedersen.commit_value(b[k], s[k]) for k in range(2 * m)]

        diagonals = diagonals_from_chunks(calculator,
                                          self.statement.shuffled_ciphers,
                                          self.witness.matrix_a,
                                          self.statement.product, a_0)
        diagonal_ciphers = []
        for k in range(2 * m):
            if k == m:
                diagonal_ciphers.append(diagonals[k])
            else:
                var0 = self.parameters.encrypt(b[k], tau[k])
                diagonal_ciphers.append(add_cipher(var0, diagonals[k], curve))

        _append_statement(transcript, self.parameters, self.statement)
        _append_commitments(transcript, a_0_commit, b_commits,
                            diagonal_ciphers)
        x = transcript.challenge_scalar(b'multi_exp_x', order)
        x_powers = powers(x, 2 * m, order)

        # a = a_0 + sum(x^i * a_i), r = r_0 + sum(x^i * r_i)
        a_blinded = list(a_0)
        r_blinded = r_0
        for i in range(m):
            var0 = scale_vector(x_powers[i + 1], self.witness.matrix_a[i],
                                order)
            a_blinded = add_vectors(a_blinded, var0, order)
            var1 = mul_mod(x_powers[i + 1], self.witness.matrix_blinders[i],
                           order)
            r_blinded = add_mod(r_blinded, var1, order)

        b_blinded = calculator.scalars_by_scalars(x_powers, b)
        s_blinded = calculator.scalars_by_scalars(x_powers, s)
        tau_blinded = calculator.scalars_by_scalars(x_powers, tau)

        logger.debug('multi-exponent argument for %dx%d ciphers', m, self.n)
        return Proof(a_0_commit, b_commits, diagonal_ciphers, a_blinded,
                     r_blinded, b_blinded, s_blinded, tau_blinded)


class Proof:
    """Multi-exponentiation argument

    Attributes:
        a_0_commit (ShortPoint): commitment to the random row a_0
        b_commits (List[ShortPoint]): commitments to b_0, ..., b_{2m-1}
        diagonal_ciphers (List[[ShortPoint, ShortPoint]]): E_0,...,E_{2m-1}
        a_blinded (List[int]): a_0 + sum(x^i * a_i)
        r_blinded (int): opening of the folded row commitments
        b_blinded (int): sum(x^k * b_k)
        s_blinded (int): opening of the folded scalar commitments
        tau_blinded (int): sum(x^k * tau_k)
    """
    def __init__(self, a_0_commit, b_commits, diagonal_ciphers, a_blinded,
                 r_blinded, b_blinded, s_blinded, tau_blinded):
        self.a_0_commit = a_0_commit
        self.b_commits = b_commits
        self.diagonal_ciphers = diagonal_ciphers
        self.a_blinded = a_blinded
        self.r_blinded = r_blinded
        self.b_blinded = b_blinded
        self.s_blinded = s_blinded
        self.tau_blinded = tau_blinded

    def verify(self, parameters, statement, transcript):
        """Verify
        c_A0 + sum(x^i * c_Ai) = com_ck(a; r),
        sum(x^k * c_Bk) = com_ck(b; s) and
        sum(x^k * E_k) = Enc(b*H; tau) + sum(x^(m-i) * <a, C_i>).

        Args:
            parameters (Parameters): public parameters
            statement (Statement): ciphers, product and commitments
            transcript (Transcript): transcript, mutated

        Raises:
            VerificationError: proof rejected
        """
        curve = parameters.curve
        order = curve.order
        pedersen = parameters.pedersen
        calculator = parameters.calculator
        m = statement.m

        if len(statement.commitments_to_exponents) != m:
            raise VerificationError('%d exponent commitments for %d rows'
                                    % (len(statement.commitments_to_exponents),
                                       m))
        if (len(self.b_commits) != 2 * m or
                len(self.diagonal_ciphers) != 2 * m or
                len(self.a_blinded) != statement.n or
                any(len(row) != statement.n
                    for row in statement.shuffled_ciphers)):
            raise VerificationError('malformed multi-exponent argument')

        if not self.b_commits[m].is_identity():
            raise VerificationError('centre scalar commitment is not zero')
        if self.diagonal_ciphers[m] != statement.product:
            raise VerificationError('centre diagonal is not the product')

        _append_statement(transcript, parameters, statement)
        _append_commitments(transcript, self.a_0_commit, self.b_commits,
                            self.diagonal_ciphers)
        x = transcript.challenge_scalar(b'multi_exp_x', order)
        x_powers = powers(x, 2 * m, order)

        var0 = self.a_0_commit
        for i in range(m):
            var1 = curve.multiplication(x_powers[i + 1],
                                        statement.commitments_to_exponents[i])
            var0 = curve.addition(var0, var1)
        if var0 != pedersen.commit_vector(self.a_blinded, self.r_blinded):
            raise VerificationError('exponent commitments do not open')

        var0 = calculator.scalars_by_points(x_powers, self.b_commits)
        if var0 != pedersen.commit_value(self.b_blinded, self.s_blinded):
            raise VerificationError('scalar commitments do not open')

        lhs = calculator.scalars_by_ciphers(x_powers, self.diagonal_ciphers)
        rhs = parameters.encrypt(self.b_blinded, self.tau_blinded)
        for i in range(m):
            var0 = scale_vector(x_powers[m - 1 - i], self.a_blinded, order)
            var1 = calculator.scalars_by_ciphers(
                var0, statement.shuffled_ciphers[i])
            rhs = add_cipher(rhs, var1, curve)
        if lhs != rhs:
            raise VerificationError('diagonal ciphers do not match')

        logger.debug('multi-exponent argument accepted')
