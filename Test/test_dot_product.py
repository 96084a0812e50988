import pytest

from zkshuffle.dot_product import (DotProductCalculator, powers, hadamard,
                                   bilinearmap, chunks)
from zkshuffle.elgamal import add_cipher, enc, mul_cipher
from zkshuffle.errors import DotProductLenError, LengthMismatchError


LENGTH_PAIRS = [(0, 1), (1, 0), (0, 4), (2, 3), (3, 2), (5, 1)]


@pytest.fixture
def calculator(curve):
    return DotProductCalculator(curve)


@pytest.fixture
def ciphers(curve, keypair):
    return [enc(curve, keypair[1], curve.multiplication(i + 2,
                                                        curve.generator),
                curve.rand_gen.get_random_value()) for i in range(3)]


class TestScalarsByCiphers:
    def test_three_ciphers(self, curve, calculator, ciphers):
        """c1*a + c2*b + c3*c"""
        a, b, c = curve.rand_gen.get_random_array(3)
        expected = add_cipher(mul_cipher(a, ciphers[0], curve),
                              mul_cipher(b, ciphers[1], curve), curve)
        expected = add_cipher(expected, mul_cipher(c, ciphers[2], curve),
                              curve)
        assert calculator.scalars_by_ciphers([a, b, c], ciphers) == expected

    def test_single_entry(self, curve, calculator, ciphers):
        assert calculator.scalars_by_ciphers([7], ciphers[:1]) == \
            mul_cipher(7, ciphers[0], curve)

    @pytest.mark.parametrize("len_a, len_b", LENGTH_PAIRS)
    def test_length_mismatch(self, curve, calculator, ciphers, len_a, len_b):
        scalars = [1] * len_a
        with pytest.raises(DotProductLenError):
            calculator.scalars_by_ciphers(scalars, (ciphers * 2)[:len_b])


class TestScalarsByPoints:
    def test_multi_scalar_multiplication(self, curve, calculator):
        G = curve.generator
        points = [curve.multiplication(3, G), curve.multiplication(5, G)]
        assert calculator.scalars_by_points([2, 4], points) == \
            curve.multiplication(26, G)

    def test_zero_scalars(self, curve, calculator):
        points = [curve.generator, curve.generator]
        assert calculator.scalars_by_points([0, 0], points).is_identity()

    @pytest.mark.parametrize("len_a, len_b", LENGTH_PAIRS)
    def test_length_mismatch(self, curve, calculator, len_a, len_b):
        with pytest.raises(DotProductLenError):
            calculator.scalars_by_points([1] * len_a,
                                         [curve.generator] * len_b)


class TestScalarsByScalars:
    def test_sum_of_products(self, calculator):
        assert calculator.scalars_by_scalars([1, 2, 3], [4, 5, 6]) == 32

    def test_reduced(self, curve, calculator):
        q = curve.order
        assert calculator.scalars_by_scalars([q - 1], [q - 1]) == 1

    @pytest.mark.parametrize("len_a, len_b", LENGTH_PAIRS)
    def test_length_mismatch(self, calculator, len_a, len_b):
        with pytest.raises(LengthMismatchError):
            calculator.scalars_by_scalars([1] * len_a, [1] * len_b)


class TestHelpers:
    def test_powers(self):
        assert powers(3, 4, 101) == [1, 3, 9, 27]
        assert powers(3, 1, 101) == [1]

    def test_hadamard(self):
        A = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
        assert hadamard(A, 1000) == [[1, 2, 3], [4, 10, 18], [28, 80, 162]]

    def test_bilinearmap(self):
        # 1*4*y + 2*5*y^2 + 3*6*y^3 with y = 2
        assert bilinearmap([1, 2, 3], [4, 5, 6], 2, 1000) == 8 + 40 + 144

    def test_bilinearmap_length_mismatch(self):
        with pytest.raises(DotProductLenError):
            bilinearmap([1, 2], [1], 2, 1000)

    def test_chunks(self):
        assert chunks([0, 1, 2, 3, 4, 5], 2) == [[0, 1], [2, 3], [4, 5]]
