"""
Proof of knowledge of equal discrete logarithms:
PK{ (x): y1 = g^x mod p and y2 = h^x mod p }
"""

from petlib.bn import Bn

from cpzk import DEFAULT_GROUP, Prover, Verifier

params = DEFAULT_GROUP

# The secret. In practice, draw it with params.random_exponent().
x = Bn.from_decimal("31337")

prover = Prover(params, secret=x)
y1, y2 = prover.public_keys.y1, prover.public_keys.y2

# The verifier only sees the public keys.
verifier = Verifier(params, prover.public_keys)

# Simulate the prover and the verifier interacting.
commitment = prover.commit()
challenge = verifier.send_challenge(commitment)
response = prover.compute_response(challenge)
assert verifier.verify(response)

# The same check, on the raw values.
transcript = verifier.transcript
assert params.verify(
    transcript.commitment.t1,
    transcript.commitment.t2,
    transcript.challenge,
    transcript.response,
    y1,
    y2,
)
