import hashlib

from petlib.bn import Bn

from cpzk.exceptions import InvalidParameters


def ensure_bn(x):
    """
    Ensure that value is big number.

    >>> isinstance(ensure_bn(42), Bn)
    True
    >>> isinstance(ensure_bn(Bn(42)), Bn)
    True
    >>> ensure_bn(2 ** 200) == Bn.from_decimal(str(2 ** 200))
    True
    """
    if isinstance(x, Bn):
        return x
    if isinstance(x, bool) or not isinstance(x, int):
        raise TypeError("Expected an integer, got {!r}".format(type(x).__name__))
    return Bn.from_decimal(str(x))


def mod_exp(base, exponent, modulus):
    """
    Compute ``base ** exponent % modulus``.

    The computation is done by OpenSSL through petlib. A zero exponent yields ``1 % modulus``.

    >>> mod_exp(2, 4, 23) == 16
    True
    >>> mod_exp(5, 0, 23) == 1
    True

    Args:
        base: Base, reduced modulo ``modulus`` first.
        exponent: Non-negative exponent.
        modulus: Positive modulus.

    Raises:
        InvalidParameters: If the modulus is not positive or the exponent is negative.
    """
    base, exponent, modulus = ensure_bn(base), ensure_bn(exponent), ensure_bn(modulus)
    if modulus <= 0:
        raise InvalidParameters("Modulus must be positive, got {}".format(modulus))
    if exponent < 0:
        raise InvalidParameters("Exponent must be non-negative, got {}".format(exponent))
    return (base % modulus).mod_pow(exponent, modulus)


def random_below(bound, rng=None):
    """
    Draw a number uniformly at random from ``[0, bound)``.

    By default the number comes from OpenSSL's ``BN_rand_range``, which resamples instead of
    reducing, so there is no modulo bias. Any object with a ``randrange`` method, e.g.
    :py:class:`random.Random` or :py:class:`secrets.SystemRandom`, can be passed as ``rng``
    instead, which makes runs reproducible.

    >>> x = random_below(6)
    >>> 0 <= x < 6
    True

    Args:
        bound: Exclusive upper bound.
        rng: Optional source of randomness.

    Raises:
        InvalidParameters: If the bound is not positive.
    """
    bound = ensure_bn(bound)
    if bound <= 0:
        raise InvalidParameters("Bound must be positive, got {}".format(bound))
    if rng is None:
        return bound.random()
    return ensure_bn(rng.randrange(int(bound)))


def hash_to_subgroup(label, p, q):
    """
    Derive an element of the order-``q`` subgroup of :math:`Z_p^*` from a label.

    The label is hashed into :math:`Z_p^*` and raised to the cofactor :math:`(p - 1) / q`. Nobody
    knows the discrete logarithm of the result with respect to any other generator, which makes
    it suitable as an independent second generator.

    >>> h = hash_to_subgroup(b"h", 23, 11)
    >>> mod_exp(h, 11, 23) == 1
    True

    Args:
        label (bytes): Public label.
        p: Prime modulus.
        q: Prime order of the subgroup, dividing ``p - 1``.
    """
    p, q = int(p), int(q)
    if (p - 1) % q != 0:
        raise InvalidParameters("Subgroup order must divide p - 1")
    cofactor = (p - 1) // q

    counter = 0
    while True:
        digest = hashlib.sha512(label + b"%i" % counter).digest()
        candidate = mod_exp(int.from_bytes(digest, "big"), cofactor, p)
        if candidate > 1:
            return candidate
        counter += 1
