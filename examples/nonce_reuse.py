"""
Why a nonce must never answer two challenges: the secret falls out of the two responses.
"""

from cpzk import toy_group
from cpzk.extractor import recover_from_nonce_reuse

params = toy_group()
x, r = 4, 6

# Both responses are computed with the same nonce r.
c1, c2 = 5, 7
s1 = params.response(r, c1, x)
s2 = params.response(r, c2, x)

assert recover_from_nonce_reuse(params, c1, s1, c2, s2) == x
