import pytest

from zkshuffle.eccwrapper import Fastecdsa as ECCobj
from zkshuffle.eccwrapper import ShortPoint
from zkshuffle.errors import ConfigError


class TestCurveLookup:
    def test_from_name(self, curve):
        assert ECCobj.from_name('brainpoolP160r1').order == curve.order

    def test_unknown_name(self):
        with pytest.raises(ConfigError):
            ECCobj.from_name('no_such_curve')

    def test_generators_are_per_curve(self, curve):
        other = ECCobj.from_name('secp256k1')
        assert other.generator != curve.generator


class TestGroupOperations:
    def test_identity_is_neutral(self, curve):
        G = curve.generator
        assert curve.addition(G, curve.identity) == G
        assert curve.addition(curve.identity, G) == G

    def test_inverse(self, curve):
        G = curve.generator
        assert curve.addition(G, curve.negation(G)).is_identity()
        assert curve.subtraction(G, G).is_identity()

    def test_doubling(self, curve):
        G = curve.generator
        assert curve.addition(G, G) == curve.multiplication(2, G)

    def test_scalar_reduction(self, curve):
        G = curve.generator
        assert curve.multiplication(curve.order, G).is_identity()
        assert curve.multiplication(-1, G) == curve.negation(G)
        assert curve.multiplication(curve.order + 3, G) == \
            curve.multiplication(3, G)

    def test_isoncurve(self, curve):
        assert curve.isoncurve(curve.generator)
        assert curve.isoncurve(curve.identity)
        assert not curve.isoncurve(ShortPoint(1, 1))

    def test_points_hashable(self, curve):
        assert len({curve.generator, curve.multiplication(1,
                                                          curve.generator)}) == 1
