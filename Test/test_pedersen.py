import pytest

from zkshuffle.errors import LengthMismatchError
from zkshuffle.pedersen import CommitKey, Pedersen, commit_vector


@pytest.fixture
def commit_key(curve):
    key, _ = CommitKey.generate(curve, 3)
    return key


class TestCommitVector:
    def test_definition(self, curve, commit_key):
        g = commit_key.generators
        h = commit_key.blinding_generator
        expected = curve.multiplication(5, h)
        for scalar, point in zip([1, 2, 3], g):
            expected = curve.addition(expected,
                                      curve.multiplication(scalar, point))
        assert commit_vector(curve, commit_key, [1, 2, 3], 5) == expected

    def test_homomorphic(self, curve, commit_key):
        q = curve.order
        a = curve.rand_gen.get_random_array(3)
        b = curve.rand_gen.get_random_array(3)
        r, s = curve.rand_gen.get_random_array(2)
        var0 = curve.addition(commit_vector(curve, commit_key, a, r),
                              commit_vector(curve, commit_key, b, s))
        ab = [(x + y) % q for x, y in zip(a, b)]
        assert var0 == commit_vector(curve, commit_key, ab, (r + s) % q)

    def test_zero_commitment_is_identity(self, curve, commit_key):
        assert commit_vector(curve, commit_key, [0, 0, 0], 0).is_identity()

    def test_blinding_hides(self, curve, commit_key):
        assert commit_vector(curve, commit_key, [1, 2, 3], 1) != \
            commit_vector(curve, commit_key, [1, 2, 3], 2)

    @pytest.mark.parametrize("size", [0, 2, 4])
    def test_length_mismatch(self, curve, commit_key, size):
        with pytest.raises(LengthMismatchError):
            commit_vector(curve, commit_key, [1] * size, 1)


class TestPedersen:
    def test_commit_value(self, curve, commit_key):
        pedersen = Pedersen(commit_key, curve)
        assert pedersen.commit_value(7, 9) == \
            pedersen.commit_vector([7, 0, 0], 9)

    def test_commit_matrix(self, curve, commit_key):
        pedersen = Pedersen(commit_key, curve)
        rows = [[1, 2, 3], [4, 5, 6]]
        assert pedersen.commit_matrix(rows, [7, 8]) == [
            pedersen.commit_vector(rows[0], 7),
            pedersen.commit_vector(rows[1], 8)]

    def test_commit_matrix_mismatch(self, curve, commit_key):
        with pytest.raises(LengthMismatchError):
            Pedersen(commit_key, curve).commit_matrix([[1, 2, 3]], [1, 2])


class TestCommitKey:
    def test_generate(self, curve):
        key, secret_keys = CommitKey.generate(curve, 4)
        assert len(key) == 4
        assert key.to_list() == [curve.multiplication(k, curve.generator)
                                 for k in secret_keys]

    def test_list_round_trip(self, commit_key):
        assert CommitKey.from_list(commit_key.to_list()) == commit_key

    def test_combine(self, curve, commit_key):
        other, _ = CommitKey.generate(curve, 3)
        combined = commit_key.combine(curve, other)
        assert combined.to_list() == [
            curve.addition(a, b) for a, b in zip(commit_key.to_list(),
                                                 other.to_list())]

    def test_combine_mismatch(self, curve, commit_key):
        other, _ = CommitKey.generate(curve, 2)
        with pytest.raises(LengthMismatchError):
            commit_key.combine(curve, other)
