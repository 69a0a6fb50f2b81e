r"""
Witness extraction from two accepting transcripts (special soundness).

Two accepting transcripts :math:`(t, c_1, s_1)` and :math:`(t, c_2, s_2)` for the same commitment
and distinct challenges satisfy :math:`s_1 - s_2 = (c_2 - c_1) x \bmod q`, hence

.. math::

    x = (s_1 - s_2) (c_2 - c_1)^{-1} \bmod q

This is why a prover that can answer two challenges must know :math:`x`, and why a nonce must
never be used for more than one challenge.
"""

from cpzk.exceptions import ExtractionError
from cpzk.utils import ensure_bn


def recover_from_nonce_reuse(params, c1, s1, c2, s2):
    """
    Recover the secret from two responses computed with the same nonce.

    >>> from cpzk.group import toy_group
    >>> recover_from_nonce_reuse(toy_group(), 5, 8, 7, 0) == 4
    True

    Raises:
        ExtractionError: If the challenges are equal modulo ``q``.
    """
    q = params.q
    c1, s1, c2, s2 = (ensure_bn(v) % q for v in (c1, s1, c2, s2))
    if c1 == c2:
        raise ExtractionError("Challenges must differ")
    return s1.mod_sub(s2, q).mod_mul(c2.mod_sub(c1, q).mod_inverse(q), q)


def extract_secret(params, public_keys, first, second):
    """
    Extract the secret from two accepting transcripts sharing a commitment.

    Args:
        params (:py:class:`cpzk.group.GroupParameters`): Group parameters.
        public_keys (:py:class:`cpzk.group.PublicKeys`): Public keys both transcripts verify
            against.
        first: A :py:class:`cpzk.base.Transcript`.
        second: Another transcript with the same commitment.

    Raises:
        ExtractionError: If the transcripts do not share a commitment, use the same challenge, or
            do not verify.
    """
    if first.commitment != second.commitment:
        raise ExtractionError("Transcripts do not share a commitment")

    for transcript in (first, second):
        commitment = transcript.commitment
        accepted = params.verify(
            commitment.t1,
            commitment.t2,
            transcript.challenge,
            transcript.response,
            public_keys.y1,
            public_keys.y2,
        )
        if not accepted:
            raise ExtractionError("Transcript does not verify")

    return recover_from_nonce_reuse(
        params, first.challenge, first.response, second.challenge, second.response
    )
