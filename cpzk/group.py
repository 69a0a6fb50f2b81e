r"""
Prime-order subgroups of :math:`Z_p^*` and the arithmetic of the Chaum-Pedersen protocol.

The protocol proves knowledge of :math:`x` such that

.. math::

    PK\{ (x): y_1 = g^x \bmod p \land y_2 = h^x \bmod p \}

where :math:`g` and :math:`h` generate the same subgroup of prime order :math:`q`.

See "`Wallet Databases with Observers`_" by Chaum and Pedersen, 1992.

.. _`Wallet Databases with Observers`:
    https://link.springer.com/content/pdf/10.1007/3-540-48071-4_7.pdf
"""

import warnings

import attr
from petlib.bn import Bn

from cpzk.consts import DEFAULT_P_HEX, DEFAULT_G, DEFAULT_H_LABEL
from cpzk.consts import TOY_P, TOY_Q, TOY_G, TOY_H
from cpzk.exceptions import InvalidParameters, InvalidGroupError, GroupMismatchError
from cpzk.utils import ensure_bn, mod_exp, random_below, hash_to_subgroup


@attr.s(frozen=True)
class PublicKeys:
    """
    Public values :math:`(y_1, y_2) = (g^x, h^x)` of a prover.
    """

    y1 = attr.ib(converter=ensure_bn)
    y2 = attr.ib(converter=ensure_bn)


@attr.s(frozen=True)
class Commitment:
    """
    First message of a session, :math:`(t_1, t_2) = (g^r, h^r)`.
    """

    t1 = attr.ib(converter=ensure_bn)
    t2 = attr.ib(converter=ensure_bn)


@attr.s(frozen=True)
class GroupParameters:
    """
    Public parameters shared by the prover and the verifier.

    The parameters are validated on construction: :math:`p` and :math:`q` must be prime,
    :math:`q` must divide :math:`p - 1`, and both generators must have order :math:`q`. Since
    :math:`Z_p^*` is cyclic it has exactly one subgroup of order :math:`q`, so the last check
    guarantees that :math:`g` and :math:`h` generate the same subgroup.

    >>> params = GroupParameters(p=23, q=11, g=2, h=3)
    >>> keys = params.public_keys(4)
    >>> (keys.y1, keys.y2) == (16, 12)
    True

    Args:
        p: Prime modulus.
        q: Prime order of the subgroup generated by ``g`` and ``h``.
        g: First generator.
        h: Second generator.

    Raises:
        InvalidGroupError: If ``p`` and ``q`` do not describe a prime-order subgroup.
        GroupMismatchError: If a generator is not of order ``q``.
    """

    p = attr.ib(converter=ensure_bn)
    q = attr.ib(converter=ensure_bn)
    g = attr.ib(converter=ensure_bn)
    h = attr.ib(converter=ensure_bn)

    def __attrs_post_init__(self):
        self.validate()

    def validate(self):
        """Check the group invariants, raising on the first violation."""
        if self.p <= 2 or not self.p.is_prime():
            raise InvalidGroupError("Modulus p is not an odd prime")
        if self.q <= 1 or not self.q.is_prime():
            raise InvalidGroupError("Subgroup order q is not prime")
        if (self.p - 1) % self.q != 0:
            raise InvalidGroupError("Subgroup order q does not divide p - 1")

        for name, gen in (("g", self.g), ("h", self.h)):
            if not self.is_element(gen) or gen == 1:
                raise GroupMismatchError(
                    "Generator {} does not generate the subgroup of order q".format(name)
                )

    def is_element(self, value):
        """
        Tell whether ``value`` is an element of the order-``q`` subgroup.

        >>> GroupParameters(p=23, q=11, g=2, h=3).is_element(16)
        True
        >>> GroupParameters(p=23, q=11, g=2, h=3).is_element(5)
        False
        """
        value = ensure_bn(value)
        if not 0 < value < self.p:
            return False
        return mod_exp(value, self.q, self.p) == 1

    def random_exponent(self, rng=None):
        """Draw an exponent uniformly from :math:`[0, q)`."""
        return random_below(self.q, rng)

    def public_keys(self, x):
        """Compute :math:`(g^x, h^x)` for a secret ``x``."""
        return PublicKeys(*self._exp_pair(x))

    def commit(self, r):
        """Compute the commitment :math:`(g^r, h^r)` for a nonce ``r``."""
        return Commitment(*self._exp_pair(r))

    def _exp_pair(self, exponent):
        exponent = self.reduce_exponent(exponent, "exponent")
        return mod_exp(self.g, exponent, self.p), mod_exp(self.h, exponent, self.p)

    def reduce_exponent(self, value, name="exponent"):
        """
        Bring a non-negative exponent into :math:`[0, q)`, warning if it had to be reduced.

        Raises:
            InvalidParameters: If ``value`` is negative.
        """
        value = ensure_bn(value)
        if value < 0:
            raise InvalidParameters("{} must be non-negative".format(name))
        if value >= self.q:
            warnings.warn(
                "{} is outside [0, q), reducing it modulo q".format(name), RuntimeWarning
            )
            value = value % self.q
        return value

    def response(self, r, c, x):
        r"""
        Compute the prover's answer :math:`s = (r - c x) \bmod q`.

        The result is always the representative in :math:`[0, q)`.

        >>> GroupParameters(p=23, q=11, g=2, h=3).response(6, 5, 4) == 8
        True

        Args:
            r: Nonce used for the commitment.
            c: Challenge.
            x: Secret.
        """
        r = self.reduce_exponent(r, "nonce")
        c = self.reduce_exponent(c, "challenge")
        x = self.reduce_exponent(x, "secret")
        return r.mod_sub(c.mod_mul(x, self.q), self.q)

    def verify(self, t1, t2, c, s, y1, y2):
        r"""
        Check a transcript against the public keys.

        Accepts iff :math:`g^s y_1^c \equiv t_1` and :math:`h^s y_2^c \equiv t_2` modulo
        :math:`p`. The commitments are compared as given, so values not reduced modulo :math:`p`
        are rejected.

        >>> GroupParameters(p=23, q=11, g=2, h=3).verify(18, 16, 5, 8, 16, 12)
        True

        Returns:
            bool: True if both equations hold, False otherwise.
        """
        t1, t2, c, s, y1, y2 = (ensure_bn(v) for v in (t1, t2, c, s, y1, y2))
        if c < 0 or s < 0:
            return False

        p = self.p
        lhs1 = mod_exp(self.g, s, p).mod_mul(mod_exp(y1, c, p), p)
        lhs2 = mod_exp(self.h, s, p).mod_mul(mod_exp(y2, c, p), p)
        return lhs1 == t1 and lhs2 == t2


def default_group():
    """
    Build the 1536-bit group of RFC 3526 with a second generator derived from a public label.
    """
    p = Bn.from_hex(DEFAULT_P_HEX)
    q = Bn.from_decimal(str((int(p) - 1) // 2))
    h = hash_to_subgroup(DEFAULT_H_LABEL, p, q)
    return GroupParameters(p=p, q=q, g=DEFAULT_G, h=h)


def toy_group():
    """
    Build the group :math:`p = 23, q = 11, g = 2, h = 3`. Only suitable for tests and examples.
    """
    return GroupParameters(p=TOY_P, q=TOY_Q, g=TOY_G, h=TOY_H)


DEFAULT_GROUP = default_group()
