import pytest

from zkshuffle.dot_product import DotProductCalculator, chunks
from zkshuffle.elgamal import add_cipher, enc, mul_cipher
from zkshuffle.errors import LengthMismatchError, VerificationError
from zkshuffle.multi_exponent_argument import (Prover, Proof, Statement,
                                               Witness, diagonals_from_chunks)
from zkshuffle.transcript import Transcript


class TestDiagonals:
    def test_three_by_two(self, curve, keypair):
        q = curve.order
        T = enc(curve, keypair[1], curve.multiplication(5, curve.generator),
                curve.rand_gen.get_random_value())
        s = curve.rand_gen.get_random_array(6)
        r = curve.rand_gen.get_random_array(2)
        calculator = DotProductCalculator(curve)

        claimed = calculator.scalars_by_ciphers(s, [T] * 6)
        diagonals = diagonals_from_chunks(calculator, [[T, T]] * 3,
                                          chunks(s, 2), claimed, r)

        def times_T(*values):
            return mul_cipher(sum(values) % q, T, curve)

        r0, r1 = r
        s0, s1, s2, s3, s4, s5 = s
        assert diagonals == [
            times_T(r0, r1),
            times_T(r0, r1, s0, s1),
            times_T(r0, r1, s0, s1, s2, s3),
            times_T(s0, s1, s2, s3, s4, s5),
            times_T(s2, s3, s4, s5),
            times_T(s4, s5),
        ]

    def test_centre_is_claimed_product(self, curve, keypair):
        T = enc(curve, keypair[1], curve.generator, 3)
        calculator = DotProductCalculator(curve)
        claimed = enc(curve, keypair[1], curve.multiplication(9,
                                                              curve.generator),
                      4)
        diagonals = diagonals_from_chunks(calculator, [[T, T]] * 2,
                                          [[1, 2], [3, 4]], claimed, [5, 6])
        assert len(diagonals) == 4
        assert diagonals[2] == claimed

    def test_row_mismatch(self, curve, keypair):
        T = enc(curve, keypair[1], curve.generator, 3)
        with pytest.raises(LengthMismatchError):
            diagonals_from_chunks(DotProductCalculator(curve), [[T, T]] * 2,
                                  [[1, 2]], T, [5, 6])


@pytest.fixture
def make_instance(curve, keypair, make_config):
    """Multi-exponentiation statement and witness for m rows of n ciphers"""
    def _make(m, n):
        config = make_config(m, n)
        parameters = config.multi_exp_parameters()
        ciphers = [[enc(curve, keypair[1],
                        curve.multiplication(i * n + j + 1, curve.generator),
                        curve.rand_gen.get_random_value())
                    for j in range(n)] for i in range(m)]
        matrix_a = curve.rand_gen.get_random_matrix(m, n)
        blinders = curve.rand_gen.get_random_array(m)
        ro = curve.rand_gen.get_random_value()

        product = parameters.encrypt(0, ro)
        for i in range(m):
            product = add_cipher(product, config.calculator.scalars_by_ciphers(
                matrix_a[i], ciphers[i]), curve)
        commitments = config.pedersen.commit_matrix(matrix_a, blinders)
        return (parameters, Statement(ciphers, product, commitments),
                Witness(matrix_a, blinders, ro))
    return _make


class TestMultiExponentArgument:
    @pytest.mark.parametrize("m, n", [(1, 2), (2, 2), (3, 2), (2, 4)])
    def test_completeness(self, make_instance, m, n):
        parameters, statement, witness = make_instance(m, n)
        proof = Prover(parameters, statement, witness).prove(Transcript())
        proof.verify(parameters, statement, Transcript())

    def test_wrong_product(self, curve, make_instance):
        parameters, statement, witness = make_instance(2, 2)
        proof = Prover(parameters, statement, witness).prove(Transcript())
        statement.product = add_cipher(statement.product,
                                       parameters.encrypt(1, 1), curve)
        with pytest.raises(VerificationError):
            proof.verify(parameters, statement, Transcript())

    def test_product_not_matching_witness(self, curve, make_instance):
        parameters, statement, witness = make_instance(2, 2)
        witness.ro = witness.ro + 1
        proof = Prover(parameters, statement, witness).prove(Transcript())
        with pytest.raises(VerificationError):
            proof.verify(parameters, statement, Transcript())

    def test_tampered_response(self, curve, make_instance):
        parameters, statement, witness = make_instance(2, 2)
        proof = Prover(parameters, statement, witness).prove(Transcript())
        proof.tau_blinded = (proof.tau_blinded + 1) % curve.order
        with pytest.raises(VerificationError):
            proof.verify(parameters, statement, Transcript())

    def test_different_transcript(self, make_instance):
        parameters, statement, witness = make_instance(2, 2)
        proof = Prover(parameters, statement, witness).prove(Transcript())
        with pytest.raises(VerificationError):
            proof.verify(parameters, statement, Transcript(b'other'))

    def test_malformed_proof(self, make_instance):
        parameters, statement, witness = make_instance(2, 2)
        proof = Prover(parameters, statement, witness).prove(Transcript())
        truncated = Proof(proof.a_0_commit, proof.b_commits[:-1],
                          proof.diagonal_ciphers, proof.a_blinded,
                          proof.r_blinded, proof.b_blinded, proof.s_blinded,
                          proof.tau_blinded)
        with pytest.raises(VerificationError):
            truncated.verify(parameters, statement, Transcript())

    def test_witness_row_mismatch(self, make_instance):
        parameters, statement, witness = make_instance(2, 2)
        witness.matrix_a = witness.matrix_a[:1]
        with pytest.raises(LengthMismatchError):
            Prover(parameters, statement, witness)
