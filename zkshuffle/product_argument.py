# ! /usr/bin/env python
# -*- coding: utf-8 -*-
# ===================================================================
# product_argument.py
#
# 18.10.2026
#
# @desc: Product argument of Bayer and Groth: the entries of m committed
#        rows of n values multiply to a public value b. For m > 1 a
#        Hadamard argument (built on the zero argument) reduces the rows
#        to one committed vector, the single value product argument
#        finishes the proof.
# ===================================================================
import logging

from zkshuffle.dot_product import (add_mod, mul_mod, sub_mod, neg_mod,
                                   powers, scale_vector, add_vectors,
                                   hadamard, bilinearmap)
from zkshuffle.errors import LengthMismatchError, VerificationError

logger = logging.getLogger(__name__)


# Single Value Product ---------------------------------------------------------
class SingleValueProductProver:
    """Prover for c_a = com_ck(a; r) and prod(a_i) = b

    Attributes:
        config (PublicConfig): public parameters
        commitment (ShortPoint): commitment c_a
        a (List[int]): committed vector
        r (int): commitment randomness
    """
    def __init__(self, config, commitment, a, r):
        self.config = config
        self.commitment = commitment
        self.a = a
        self.r = r

    def prove(self, transcript, product):
        """
        Args:
            transcript (Transcript): transcript, mutated
            product (int): b = prod(a_i)

        Returns:
            SingleValueProductProof
        """
        curve = self.config.curve
        order = curve.order
        pedersen = self.config.pedersen
        a = self.a
        n = len(a)

        # partial products alpha_i = a_1*...*a_i
        alpha = [a[0]]
        for i in range(1, n):
            alpha.append(mul_mod(alpha[i - 1], a[i], order))

        gamma = curve.rand_gen.get_random_array(n)
        r_gamma = curve.rand_gen.get_random_value()
        gamma_commit = pedersen.commit_vector(gamma, r_gamma)

        delta = curve.rand_gen.get_random_array(n)
        delta[0] = gamma[0]
        delta[n - 1] = 0
        s_delta = curve.rand_gen.get_random_value()
        s_Delta = curve.rand_gen.get_random_value()

        # vectors of n-1 values are padded with 0 to the key length
        var0 = []
        for i in range(n - 1):
            var1 = mul_mod(delta[i], gamma[i + 1], order)
            var0.append(neg_mod(var1, order))
        delta_commit = pedersen.commit_vector(var0 + [0], s_delta)

        var0 = []
        for i in range(n - 1):
            var1 = mul_mod(a[i + 1], delta[i], order)
            var2 = mul_mod(alpha[i], gamma[i + 1], order)
            var3 = sub_mod(delta[i + 1], var1, order)
            var0.append(sub_mod(var3, var2, order))
        Delta_commit = pedersen.commit_vector(var0 + [0], s_Delta)

        _append_single_value(transcript, self.commitment, product,
                             gamma_commit, delta_commit, Delta_commit)
        x = transcript.challenge_scalar(b'single_value_x', order)

        gamma_tilde = add_vectors(scale_vector(x, a, order), gamma, order)
        alpha_tilde = add_vectors(scale_vector(x, alpha, order), delta, order)
        r_gamma_tilde = add_mod(mul_mod(x, self.r, order), r_gamma, order)
        r_alpha_tilde = add_mod(mul_mod(x, s_Delta, order), s_delta, order)

        return SingleValueProductProof(gamma_commit, delta_commit,
                                       Delta_commit, gamma_tilde, alpha_tilde,
                                       r_gamma_tilde, r_alpha_tilde)


class SingleValueProductProof:
    """
    Attributes:
        gamma_commit (ShortPoint): commitment to the random vector gamma
        delta_commit (ShortPoint): commitment to -delta_i*gamma_(i+1)
        Delta_commit (ShortPoint): commitment to the cross terms
        gamma_tilde (List[int]): x*a + gamma
        alpha_tilde (List[int]): x*alpha + delta
        r_gamma_tilde (int): opening of x*c_a + c_gamma
        r_alpha_tilde (int): opening of x*c_Delta + c_delta
    """
    def __init__(self, gamma_commit, delta_commit, Delta_commit, gamma_tilde,
                 alpha_tilde, r_gamma_tilde, r_alpha_tilde):
        self.gamma_commit = gamma_commit
        self.delta_commit = delta_commit
        self.Delta_commit = Delta_commit
        self.gamma_tilde = gamma_tilde
        self.alpha_tilde = alpha_tilde
        self.r_gamma_tilde = r_gamma_tilde
        self.r_alpha_tilde = r_alpha_tilde

    def verify(self, config, transcript, commitment, product):
        """Verify gamma_tilde[1] = alpha_tilde[1], alpha_tilde[n] = x*b,
        x*c_a + c_gamma = com_ck(gamma_tilde; r_gamma_tilde) and
        x*c_Delta + c_delta = com_ck(x*alpha_tilde[i+1] -
        alpha_tilde[i]*gamma_tilde[i+1]; r_alpha_tilde).

        Raises:
            VerificationError: proof rejected
        """
        curve = config.curve
        order = curve.order
        pedersen = config.pedersen
        n = config.n

        if len(self.gamma_tilde) != n or len(self.alpha_tilde) != n:
            raise VerificationError('malformed single value product argument')

        _append_single_value(transcript, commitment, product,
                             self.gamma_commit, self.delta_commit,
                             self.Delta_commit)
        x = transcript.challenge_scalar(b'single_value_x', order)

        if self.gamma_tilde[0] % order != self.alpha_tilde[0] % order:
            raise VerificationError('first partial product is wrong')

        if self.alpha_tilde[n - 1] % order != mul_mod(x, product, order):
            raise VerificationError('product does not match')

        var0 = curve.addition(curve.multiplication(x, commitment),
                              self.gamma_commit)
        if var0 != pedersen.commit_vector(self.gamma_tilde,
                                          self.r_gamma_tilde):
            raise VerificationError('committed vector does not open')

        var0 = []
        for i in range(n - 1):
            var1 = mul_mod(x, self.alpha_tilde[i + 1], order)
            var2 = mul_mod(self.alpha_tilde[i], self.gamma_tilde[i + 1], order)
            var0.append(sub_mod(var1, var2, order))
        var3 = curve.addition(curve.multiplication(x, self.Delta_commit),
                              self.delta_commit)
        if var3 != pedersen.commit_vector(var0 + [0], self.r_alpha_tilde):
            raise VerificationError('partial products are inconsistent')


def _append_single_value(transcript, commitment, product, gamma_commit,
                         delta_commit, Delta_commit):
    transcript.append(b'single_value_commitment', commitment)
    transcript.append(b'single_value_product', product)
    transcript.append(b'single_value_gamma', gamma_commit)
    transcript.append(b'single_value_delta', delta_commit)
    transcript.append(b'single_value_Delta', Delta_commit)


# Zero Argument ----------------------------------------------------------------
class ZeroArgumentProver:
    """Prover for sum(a_i *_y b_i) = 0 with committed a_1,...,a_m and
    b_1,...,b_m, where *_y is the bilinear map
    a *_y b = sum_j(a_j*b_j*y^j).
    """
    def __init__(self, config, y, a_list, a_blinders, a_commits, b_list,
                 b_blinders, b_commits):
        """
        Args:
            config (PublicConfig): public parameters
            y (int): challenge of the bilinear map
            a_list (List[List[int]]): left vectors
            a_blinders (List[int]): randomness of a_commits
            a_commits (List[ShortPoint]): commitments to a_list
            b_list (List[List[int]]): right vectors
            b_blinders (List[int]): randomness of b_commits
            b_commits (List[ShortPoint]): commitments to b_list
        """
        self.config = config
        self.y = y
        self.a_list = a_list
        self.a_blinders = a_blinders
        self.a_commits = a_commits
        self.b_list = b_list
        self.b_blinders = b_blinders
        self.b_commits = b_commits

    def prove(self, transcript):
        """Pad with random a_0 and b_(m+1), commit to the 2m+1 diagonals
        of the bilinear form, the (m+1)-th of which is the claimed zero.

        Returns:
            ZeroArgumentProof
        """
        curve = self.config.curve
        order = curve.order
        pedersen = self.config.pedersen
        m = len(self.a_list)
        n = self.config.n

        a_0 = curve.rand_gen.get_random_array(n)
        r_0 = curve.rand_gen.get_random_value()
        b_m = curve.rand_gen.get_random_array(n)
        s_m = curve.rand_gen.get_random_value()
        a_0_commit = pedersen.commit_vector(a_0, r_0)
        b_m_commit = pedersen.commit_vector(b_m, s_m)

        # A = {a_0, a_1, ... , a_m}, B = {b_1, ... , b_m, b_(m+1)}
        A = [a_0] + list(self.a_list)
        r_A = [r_0] + list(self.a_blinders)
        B = list(self.b_list) + [b_m]
        r_B = list(self.b_blinders) + [s_m]

        # P(k) = sum over A(i) *_y B(j) with k = m - j + i
        P = [0] * (2 * m + 1)
        for k in range(2 * m + 1):
            for i in range(m + 1):
                j = (m - k) + i
                if 0 <= j <= m:
                    var0 = bilinearmap(A[i], B[j], self.y, order)
                    P[k] = add_mod(P[k], var0, order)

        t_P = curve.rand_gen.get_random_array(2 * m + 1)
        t_P[m + 1] = 0
        P_commits = [pedersen.commit_value(P[k], t_P[k])
                     for k in range(2 * m + 1)]

        _append_zero(transcript, self.a_commits, self.b_commits, a_0_commit,
                     b_m_commit, P_commits)
        x = transcript.challenge_scalar(b'zero_x', order)
        x_powers = powers(x, 2 * m + 1, order)

        # f = sum(x^i * A(i)), h = sum(x^(m-j) * B(j))
        f = [0] * n
        r_f = 0
        h = [0] * n
        r_h = 0
        for i in range(m + 1):
            f = add_vectors(f, scale_vector(x_powers[i], A[i], order), order)
            r_f = add_mod(r_f, mul_mod(x_powers[i], r_A[i], order), order)
            h = add_vectors(h, scale_vector(x_powers[m - i], B[i], order),
                            order)
            r_h = add_mod(r_h, mul_mod(x_powers[m - i], r_B[i], order), order)

        t_p = 0
        for k in range(2 * m + 1):
            t_p = add_mod(t_p, mul_mod(x_powers[k], t_P[k], order), order)

        return ZeroArgumentProof(a_0_commit, b_m_commit, P_commits, f, r_f,
                                 h, r_h, t_p)


class ZeroArgumentProof:
    """
    Attributes:
        a_0_commit (ShortPoint): commitment to the random a_0
        b_m_commit (ShortPoint): commitment to the random b_(m+1)
        P_commits (List[ShortPoint]): commitments to the 2m+1 diagonals
        f (List[int]): sum(x^i * a_i)
        r_f (int): opening of f
        h (List[int]): sum(x^(m-j) * b_j)
        r_h (int): opening of h
        t_p (int): opening of f *_y h
    """
    def __init__(self, a_0_commit, b_m_commit, P_commits, f, r_f, h, r_h,
                 t_p):
        self.a_0_commit = a_0_commit
        self.b_m_commit = b_m_commit
        self.P_commits = P_commits
        self.f = f
        self.r_f = r_f
        self.h = h
        self.r_h = r_h
        self.t_p = t_p

    def verify(self, config, y, a_commits, b_commits, transcript):
        """Verify c_P(m+1) = com_ck(0; 0),
        sum(x^i * c_A(i)) = com_ck(f; r_f),
        sum(x^(m-j) * c_B(j)) = com_ck(h; r_h) and
        sum(x^k * c_P(k)) = com_ck(f *_y h; t_p).

        Raises:
            VerificationError: proof rejected
        """
        curve = config.curve
        order = curve.order
        pedersen = config.pedersen
        calculator = config.calculator
        m = len(a_commits)
        n = config.n

        if (len(b_commits) != m or len(self.P_commits) != 2 * m + 1 or
                len(self.f) != n or len(self.h) != n):
            raise VerificationError('malformed zero argument')

        if not self.P_commits[m + 1].is_identity():
            raise VerificationError('claimed zero diagonal is not zero')

        _append_zero(transcript, a_commits, b_commits, self.a_0_commit,
                     self.b_m_commit, self.P_commits)
        x = transcript.challenge_scalar(b'zero_x', order)
        x_powers = powers(x, 2 * m + 1, order)

        c_A = [self.a_0_commit] + list(a_commits)
        var0 = calculator.scalars_by_points(x_powers[:m + 1], c_A)
        if var0 != pedersen.commit_vector(self.f, self.r_f):
            raise VerificationError('left commitments do not open')

        c_B = list(b_commits) + [self.b_m_commit]
        var0 = calculator.scalars_by_points(
            [x_powers[m - j] for j in range(m + 1)], c_B)
        if var0 != pedersen.commit_vector(self.h, self.r_h):
            raise VerificationError('right commitments do not open')

        var0 = calculator.scalars_by_points(x_powers, self.P_commits)
        var1 = bilinearmap(self.f, self.h, y, order)
        if var0 != pedersen.commit_value(var1, self.t_p):
            raise VerificationError('diagonal commitments do not open')


def _append_zero(transcript, a_commits, b_commits, a_0_commit, b_m_commit,
                 P_commits):
    transcript.append(b'zero_a_commits', a_commits)
    transcript.append(b'zero_b_commits', b_commits)
    transcript.append(b'zero_a_0', a_0_commit)
    transcript.append(b'zero_b_m', b_m_commit)
    transcript.append(b'zero_P', P_commits)


# Hadamard Product ------------------------------------------------------------
class HadamardProductProver:
    """Prover that a committed vector is the entry-wise product of m
    committed rows.

    Attributes:
        config (PublicConfig): public parameters
        commitments (List[ShortPoint]): commitments to the rows
        matrix (List[List[int]]): rows F(1), ... , F(m)
        blinders (List[int]): commitment randomness of the rows
    """
    def __init__(self, config, commitments, matrix, blinders):
        self.config = config
        self.commitments = commitments
        self.matrix = matrix
        self.blinders = blinders

    def prove(self, transcript):
        """Commit to the partial products G(i) = F(1)*...*F(i) and prove
        with the zero argument that
        0 = sum(F(i+1) *_y x^i*G(i)) + (-1) *_y sum(x^i*G(i+1)).

        Returns:
            List[int], int, HadamardProductProof: product vector, its
            commitment randomness and the proof
        """
        curve = self.config.curve
        order = curve.order
        pedersen = self.config.pedersen
        m = len(self.matrix)

        G = hadamard(self.matrix, order)
        r_G = ([self.blinders[0]] + curve.rand_gen.get_random_array(m - 2) +
               [curve.rand_gen.get_random_value()])
        intermediate_commits = [pedersen.commit_vector(G[i], r_G[i])
                                for i in range(1, m - 1)]
        product_commit = pedersen.commit_vector(G[m - 1], r_G[m - 1])

        _append_hadamard(transcript, self.commitments, intermediate_commits,
                         product_commit)
        x = transcript.challenge_scalar(b'hadamard_x', order)
        y = transcript.challenge_scalar(b'hadamard_y', order)
        x_powers = powers(x, m + 1, order)

        a_commits, b_commits = _zero_statement(
            self.config, x_powers, self.commitments, intermediate_commits,
            product_commit)

        a_list = list(self.matrix[1:]) + [[neg_mod(1, order)] * self.config.n]
        a_blinders = list(self.blinders[1:]) + [0]

        b_list = []
        b_blinders = []
        for i in range(m - 1):
            b_list.append(scale_vector(x_powers[i + 1], G[i], order))
            b_blinders.append(mul_mod(x_powers[i + 1], r_G[i], order))
        var0 = [0] * self.config.n
        var1 = 0
        for i in range(m - 1):
            var2 = scale_vector(x_powers[i + 1], G[i + 1], order)
            var0 = add_vectors(var0, var2, order)
            var1 = add_mod(var1, mul_mod(x_powers[i + 1], r_G[i + 1], order),
                           order)
        b_list.append(var0)
        b_blinders.append(var1)

        zero_proof = ZeroArgumentProver(self.config, y, a_list, a_blinders,
                                        a_commits, b_list, b_blinders,
                                        b_commits).prove(transcript)

        proof = HadamardProductProof(intermediate_commits, product_commit,
                                     zero_proof)
        return G[m - 1], r_G[m - 1], proof


class HadamardProductProof:
    """
    Attributes:
        intermediate_commits (List[ShortPoint]): commitments to G(2), ...,
            G(m-1)
        product_commit (ShortPoint): commitment to G(m)
        zero_proof (ZeroArgumentProof): zero argument
    """
    def __init__(self, intermediate_commits, product_commit, zero_proof):
        self.intermediate_commits = intermediate_commits
        self.product_commit = product_commit
        self.zero_proof = zero_proof

    def verify(self, config, commitments, transcript):
        """
        Raises:
            VerificationError: proof rejected
        """
        order = config.curve.order
        m = len(commitments)

        if len(self.intermediate_commits) != m - 2:
            raise VerificationError('malformed Hadamard argument')

        _append_hadamard(transcript, commitments, self.intermediate_commits,
                         self.product_commit)
        x = transcript.challenge_scalar(b'hadamard_x', order)
        y = transcript.challenge_scalar(b'hadamard_y', order)
        x_powers = powers(x, m + 1, order)

        a_commits, b_commits = _zero_statement(
            config, x_powers, commitments, self.intermediate_commits,
            self.product_commit)

        self.zero_proof.verify(config, y, a_commits, b_commits, transcript)


def _zero_statement(config, x_powers, commitments, intermediate_commits,
                    product_commit):
    """Commitments of the zero argument derived from the row commitments:
    c_A = {c_F(2), ... , c_F(m), com(-1; 0)},
    c_B = {x*c_G(1), ... , x^(m-1)*c_G(m-1), sum(x^i*c_G(i+1))}
    """
    curve = config.curve
    m = len(commitments)

    c_G = [commitments[0]] + list(intermediate_commits) + [product_commit]

    minus_one = [neg_mod(1, curve.order)] * config.n
    a_commits = (list(commitments[1:]) +
                 [config.pedersen.commit_vector(minus_one, 0)])

    b_commits = [curve.multiplication(x_powers[i + 1], c_G[i])
                 for i in range(m - 1)]
    var0 = curve.identity
    for i in range(m - 1):
        var1 = curve.multiplication(x_powers[i + 1], c_G[i + 1])
        var0 = curve.addition(var0, var1)
    b_commits.append(var0)

    return a_commits, b_commits


def _append_hadamard(transcript, commitments, intermediate_commits,
                     product_commit):
    transcript.append(b'hadamard_rows', commitments)
    transcript.append(b'hadamard_intermediate', intermediate_commits)
    transcript.append(b'hadamard_product', product_commit)


# Product Argument -------------------------------------------------------------
class ProductArgumentProver:
    """Prover for prod over all entries of the committed rows = b"""
    def __init__(self, config, commitments, matrix, blinders, product):
        """
        Args:
            config (PublicConfig): public parameters
            commitments (List[ShortPoint]): commitments to the rows
            matrix (List[List[int]]): m rows of n values
            blinders (List[int]): commitment randomness of the rows
            product (int): b
        """
        if not len(commitments) == len(matrix) == len(blinders):
            raise LengthMismatchError(
                '%d commitments, %d rows and %d blinders'
                % (len(commitments), len(matrix), len(blinders)))
        self.config = config
        self.commitments = commitments
        self.matrix = matrix
        self.blinders = blinders
        self.product = product

    def prove(self, transcript):
        """
        Args:
            transcript (Transcript): transcript, mutated

        Returns:
            ProductArgumentProof
        """
        _append_product(transcript, self.commitments, self.product)

        if len(self.matrix) == 1:
            hadamard_proof = None
            commitment = self.commitments[0]
            vector = self.matrix[0]
            blinding = self.blinders[0]
        else:
            vector, blinding, hadamard_proof = HadamardProductProver(
                self.config, self.commitments, self.matrix,
                self.blinders).prove(transcript)
            commitment = hadamard_proof.product_commit

        single_value_proof = SingleValueProductProver(
            self.config, commitment, vector, blinding).prove(transcript,
                                                             self.product)

        logger.debug('product argument over %d rows', len(self.matrix))
        return ProductArgumentProof(hadamard_proof, single_value_proof)


class ProductArgumentProof:
    """
    Attributes:
        hadamard_proof (HadamardProductProof): None for a single row
        single_value_proof (SingleValueProductProof): single value argument
    """
    def __init__(self, hadamard_proof, single_value_proof):
        self.hadamard_proof = hadamard_proof
        self.single_value_proof = single_value_proof

    def verify(self, config, b, commitments, transcript):
        """
        Args:
            config (PublicConfig): public parameters
            b (int): claimed product
            commitments (List[ShortPoint]): commitments to the rows
            transcript (Transcript): transcript, mutated

        Raises:
            VerificationError: proof rejected
        """
        _append_product(transcript, commitments, b)

        if len(commitments) == 1:
            if self.hadamard_proof is not None:
                raise VerificationError('unexpected Hadamard argument')
            commitment = commitments[0]
        else:
            if self.hadamard_proof is None:
                raise VerificationError('missing Hadamard argument')
            self.hadamard_proof.verify(config, commitments, transcript)
            commitment = self.hadamard_proof.product_commit

        self.single_value_proof.verify(config, transcript, commitment, b)
        logger.debug('product argument accepted')


def _append_product(transcript, commitments, product):
    transcript.append(b'product_commitments', commitments)
    transcript.append(b'product_b', product)
