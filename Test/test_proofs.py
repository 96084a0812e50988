import pytest

from zkshuffle import proofs
from zkshuffle.elgamal import enc, remask


@pytest.fixture
def secret(curve):
    return curve.rand_gen.get_random_value()


class TestProofOfKnowledge:
    def test_completeness(self, curve, secret):
        public = curve.multiplication(secret, curve.generator)
        proof = proofs.PokProver(curve, curve.generator, public,
                                 secret).pok_nizk()
        assert proofs.PokVerifier(curve, curve.generator,
                                  public).pok_nizk(*proof)

    def test_wrong_secret(self, curve, secret):
        public = curve.multiplication(secret, curve.generator)
        proof = proofs.PokProver(curve, curve.generator, public,
                                 secret + 1).pok_nizk()
        assert not proofs.PokVerifier(curve, curve.generator,
                                      public).pok_nizk(*proof)

    def test_other_public(self, curve, secret):
        public = curve.multiplication(secret, curve.generator)
        proof = proofs.PokProver(curve, curve.generator, public,
                                 secret).pok_nizk()
        other = curve.multiplication(secret + 1, curve.generator)
        assert not proofs.PokVerifier(curve, curve.generator,
                                      other).pok_nizk(*proof)


class TestEqualityOfDiscreteLogs:
    def test_completeness(self, curve, secret):
        H = curve.multiplication(7, curve.generator)
        A = curve.multiplication(secret, curve.generator)
        B = curve.multiplication(secret, H)
        proof = proofs.PeqProver(curve, curve.generator, A, H, B,
                                 secret).peq_nizk()
        assert proofs.PeqVerifier(curve, curve.generator, A, H,
                                  B).peq_nizk(*proof)

    def test_different_logs(self, curve, secret):
        H = curve.multiplication(7, curve.generator)
        A = curve.multiplication(secret, curve.generator)
        B = curve.multiplication(secret + 1, H)
        proof = proofs.PeqProver(curve, curve.generator, A, H, B,
                                 secret).peq_nizk()
        assert not proofs.PeqVerifier(curve, curve.generator, A, H,
                                      B).peq_nizk(*proof)


class TestCardStatements:
    def test_remask(self, curve, keypair, secret):
        card = curve.multiplication(3, curve.generator)
        cipher = enc(curve, keypair[1], card, 11)
        remasked = remask(curve, keypair[1], cipher, secret)
        statement = proofs.remask_statement(curve, keypair[1], cipher,
                                            remasked)
        assert statement == (curve.generator,
                             curve.multiplication(secret, curve.generator),
                             keypair[1],
                             curve.multiplication(secret, keypair[1]))
        proof = proofs.PeqProver(curve, *statement, secret).peq_nizk()
        assert proofs.PeqVerifier(curve, *statement).peq_nizk(*proof)

    def test_remask_of_other_cipher(self, curve, keypair, secret):
        cipher = enc(curve, keypair[1], curve.generator, 11)
        other = enc(curve, keypair[1], curve.generator, 12)
        remasked = remask(curve, keypair[1], cipher, secret)
        statement = proofs.remask_statement(curve, keypair[1], other,
                                            remasked)
        proof = proofs.PeqProver(curve, *statement, secret).peq_nizk()
        assert not proofs.PeqVerifier(curve, *statement).peq_nizk(*proof)

    def test_reveal(self, curve, keypair):
        secret_key, public_key = keypair
        cipher = enc(curve, public_key, curve.generator, 5)
        token = curve.multiplication(secret_key, cipher[0])
        statement = proofs.reveal_statement(curve, public_key, cipher, token)
        proof = proofs.PeqProver(curve, *statement, secret_key).peq_nizk()
        assert proofs.PeqVerifier(curve, *statement).peq_nizk(*proof)

    def test_reveal_with_wrong_token(self, curve, keypair):
        secret_key, public_key = keypair
        cipher = enc(curve, public_key, curve.generator, 5)
        token = curve.multiplication(secret_key + 1, cipher[0])
        statement = proofs.reveal_statement(curve, public_key, cipher, token)
        proof = proofs.PeqProver(curve, *statement, secret_key).peq_nizk()
        assert not proofs.PeqVerifier(curve, *statement).peq_nizk(*proof)
