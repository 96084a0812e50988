import fastecdsa.curve as curvelib
import pytest

from zkshuffle.bayergroth import ShuffleStatement, ShuffleWitness
from zkshuffle.config import PublicConfig
from zkshuffle.eccwrapper import Fastecdsa as ECCobj
from zkshuffle.elgamal import enc, remask
from zkshuffle.pedersen import CommitKey


# brainpoolP160r1 keeps the curve operations of the suite cheap
@pytest.fixture(scope="session")
def curve():
    return ECCobj(curvelib.brainpoolP160r1)


@pytest.fixture
def keypair(curve):
    secret_key = curve.rand_gen.get_random_value()
    return secret_key, curve.multiplication(secret_key, curve.generator)


@pytest.fixture
def make_config(curve, keypair):
    """PublicConfig factory for an m x n deck under a fresh commit key"""
    def _make(m, n):
        commit_key, _ = CommitKey.generate(curve, n)
        return PublicConfig(curve, keypair[1], commit_key, m, n)
    return _make


@pytest.fixture
def config(make_config):
    return make_config(2, 3)


@pytest.fixture
def make_deck(curve, keypair):
    """N masked cards 1*G, ..., N*G"""
    def _make(size):
        cards = [curve.multiplication(i + 1, curve.generator)
                 for i in range(size)]
        k = curve.rand_gen.get_random_array(size)
        return [enc(curve, keypair[1], cards[i], k[i]) for i in range(size)]
    return _make


@pytest.fixture
def make_shuffle(curve, keypair, make_deck):
    """Honest shuffle of a fresh deck: statement and witness"""
    def _make(config, permutation=None):
        ciphers_in = make_deck(config.N)
        if permutation is None:
            permutation = curve.rand_gen.get_random_permutation(config.N)
        rho = curve.rand_gen.get_random_array(config.N)
        ciphers_out = [remask(curve, keypair[1], ciphers_in[permutation[i]],
                              rho[i]) for i in range(config.N)]
        return (ShuffleStatement(ciphers_in, ciphers_out),
                ShuffleWitness(permutation, rho))
    return _make
