import random

import pytest

from cpzk.exceptions import InvalidParameters, InvalidGroupError, GroupMismatchError
from cpzk.group import GroupParameters, PublicKeys, Commitment
from cpzk.utils import ensure_bn


def test_fixed_vector(group):
    keys = group.public_keys(4)
    assert (keys.y1, keys.y2) == (16, 12)

    commitment = group.commit(6)
    assert (commitment.t1, commitment.t2) == (18, 16)

    s = group.response(6, 5, 4)
    assert s == 8
    assert group.verify(18, 16, 5, 8, 16, 12)


@pytest.mark.parametrize(
    "field,value",
    [("t1", 19), ("t2", 17), ("c", 6), ("s", 9), ("y1", 17), ("y2", 13)],
)
def test_single_mutation_rejected(group, field, value):
    transcript = dict(t1=18, t2=16, c=5, s=8, y1=16, y2=12)
    transcript[field] = value
    assert not group.verify(**transcript)


def test_unreduced_commitment_rejected(group):
    assert not group.verify(18 + 23, 16, 5, 8, 16, 12)


def test_negative_transcript_values_rejected(group):
    assert not group.verify(18, 16, -5, 8, 16, 12)
    assert not group.verify(18, 16, 5, -8, 16, 12)


def test_response_range_exhaustive(group):
    q = 11
    for r in range(q):
        for c in range(q):
            for x in range(q):
                s = group.response(r, c, x)
                assert 0 <= s < q
                assert s == (r - c * x) % q


def test_response_is_deterministic(default_group):
    q = int(default_group.q)
    r, c, x = q - 1, q - 2, q - 3
    assert default_group.response(r, c, x) == default_group.response(r, c, x)
    assert default_group.response(r, c, x) == ensure_bn((r - c * x) % q)


def test_response_reduces_large_challenge(group):
    with pytest.warns(RuntimeWarning):
        s = group.response(6, 5 + 11, 4)
    assert s == 8


def test_response_reduces_large_secret(group):
    with pytest.warns(RuntimeWarning):
        s = group.response(6, 5, 4 + 22)
    assert s == 8


def test_response_rejects_negative_input(group):
    with pytest.raises(InvalidParameters):
        group.response(-1, 5, 4)


def test_completeness_random_trials(group):
    rng = random.Random(1234)
    for _ in range(200):
        x, r, c = (rng.randrange(11) for _ in range(3))
        keys = group.public_keys(x)
        commitment = group.commit(r)
        s = group.response(r, c, x)
        assert group.verify(commitment.t1, commitment.t2, c, s, keys.y1, keys.y2)


def test_completeness_default_group(default_group):
    x, r, c = (default_group.random_exponent() for _ in range(3))
    keys = default_group.public_keys(x)
    commitment = default_group.commit(r)
    s = default_group.response(r, c, x)
    assert default_group.verify(commitment.t1, commitment.t2, c, s, keys.y1, keys.y2)
    assert not default_group.verify(
        commitment.t1, commitment.t2, c, s.mod_add(1, default_group.q), keys.y1, keys.y2
    )


def test_wrong_secret_rejected(default_group):
    x = default_group.random_exponent()
    keys = default_group.public_keys(x)
    r, c = default_group.random_exponent(), default_group.random_exponent()
    commitment = default_group.commit(r)
    s = default_group.response(r, c, x + 1)
    assert not default_group.verify(commitment.t1, commitment.t2, c, s, keys.y1, keys.y2)


def test_default_group_shape(default_group):
    assert default_group.p.num_bits() == 1536
    assert int(default_group.p) % 2 ** 64 == 2 ** 64 - 1
    assert int(default_group.p) % 8 == 7
    assert default_group.q * 2 + 1 == default_group.p
    assert default_group.g == 2
    assert default_group.is_element(default_group.h)
    assert default_group.h != default_group.g


@pytest.mark.parametrize(
    "p,q,g,h",
    [
        (21, 11, 2, 3),  # p not prime
        (23, 10, 2, 3),  # q not prime
        (23, 7, 2, 3),  # q does not divide p - 1
        (2, 1, 1, 1),  # degenerate
    ],
)
def test_invalid_group(p, q, g, h):
    with pytest.raises(InvalidGroupError):
        GroupParameters(p=p, q=q, g=g, h=h)


@pytest.mark.parametrize(
    "g,h",
    [
        (5, 3),  # 5 has order 22
        (2, 22),  # 22 has order 2
        (2, 1),  # identity
        (2, 0),
        (2, 25),  # not reduced
    ],
)
def test_generator_mismatch(g, h):
    with pytest.raises(GroupMismatchError):
        GroupParameters(p=23, q=11, g=g, h=h)


def test_group_errors_are_invalid_parameters():
    with pytest.raises(InvalidParameters):
        GroupParameters(p=23, q=11, g=5, h=3)


def test_group_is_frozen(group):
    with pytest.raises(AttributeError):
        group.p = 29


def test_is_element(group):
    members = {int(group.g) ** k % 23 for k in range(11)}
    for value in range(-1, 25):
        assert group.is_element(value) == (value in members)


def test_random_exponent_with_rng(group):
    first = [group.random_exponent(random.Random(3)) for _ in range(5)]
    second = [group.random_exponent(random.Random(3)) for _ in range(5)]
    assert first == second
    assert all(0 <= v < 11 for v in first)


def test_value_types_are_converted():
    assert PublicKeys(16, 12) == PublicKeys(ensure_bn(16), ensure_bn(12))
    assert Commitment(18, 16).t1 == 18
