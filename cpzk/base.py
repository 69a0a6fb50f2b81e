"""
Interactive prover and verifier sessions, transcripts and the honest-verifier simulator.
"""

import enum

import attr

from cpzk.group import Commitment
from cpzk.exceptions import (
    NonceReuseError,
    SessionStateError,
    ValidationError,
)
from cpzk.utils import ensure_bn, mod_exp


class SessionState(enum.Enum):
    INIT = "init"
    COMMITTED = "committed"
    CHALLENGED = "challenged"
    RESPONDED = "responded"
    VERIFIED = "verified"


@attr.s(frozen=True)
class Transcript:
    """
    Interactive proof transcript.
    """

    commitment = attr.ib()
    challenge = attr.ib(converter=ensure_bn)
    response = attr.ib(converter=ensure_bn)


@attr.s(frozen=True)
class SimulationTranscript:
    """
    Simulated proof transcript.
    """

    commitment = attr.ib()
    challenge = attr.ib(converter=ensure_bn)
    response = attr.ib(converter=ensure_bn)


def simulate_transcript(params, public_keys, challenge=None, rng=None):
    r"""
    Produce an accepting transcript without knowing the secret.

    The response :math:`s` and, unless given, the challenge :math:`c` are drawn at random, and the
    commitment is solved for: :math:`t_1 = g^s y_1^c`, :math:`t_2 = h^s y_2^c`. The output has
    the same distribution as an honest transcript, which is what makes the protocol
    honest-verifier zero-knowledge.

    Args:
        params (:py:class:`cpzk.group.GroupParameters`): Group parameters.
        public_keys (:py:class:`cpzk.group.PublicKeys`): Public keys to simulate against.
        challenge: Optional fixed challenge.
        rng: Optional source of randomness, see :py:func:`cpzk.utils.random_below`.
    """
    if challenge is None:
        challenge = params.random_exponent(rng)
    challenge = ensure_bn(challenge)
    response = params.random_exponent(rng)

    p = params.p
    t1 = mod_exp(params.g, response, p).mod_mul(mod_exp(public_keys.y1, challenge, p), p)
    t2 = mod_exp(params.h, response, p).mod_mul(mod_exp(public_keys.y2, challenge, p), p)
    return SimulationTranscript(
        commitment=Commitment(t1, t2), challenge=challenge, response=response
    )


class Prover:
    """
    Prover side of the protocol.

    A prover owns the secret and runs one session at a time. Each session samples a fresh nonce,
    which is erased once the response is computed.

    Args:
        params (:py:class:`cpzk.group.GroupParameters`): Group parameters.
        secret: The witness :math:`x`. Drawn at random from :math:`[0, q)` if omitted.
        rng: Optional source of randomness, see :py:func:`cpzk.utils.random_below`.
    """

    def __init__(self, params, secret=None, rng=None):
        self.params = params
        self.rng = rng
        if secret is None:
            secret = params.random_exponent(rng)
        self.secret = ensure_bn(secret)
        self.public_keys = params.public_keys(self.secret)
        self.state = SessionState.INIT
        self._nonce = None
        self._used_nonces = set()

    def commit(self, nonce=None):
        """
        Open a session and construct the commitment.

        Args:
            nonce: Optional nonce. Drawn at random among unused nonces if omitted. A prover refuses
                a nonce it has already used, as answering two challenges with the same nonce
                reveals the secret. Nonces are compared after reduction modulo :math:`q`.

        Returns:
            :py:class:`cpzk.group.Commitment`
        """
        if self.state is SessionState.COMMITTED:
            raise SessionStateError("A session is already open")

        if nonce is None:
            nonce = self._fresh_nonce()
        nonce = self.params.reduce_exponent(nonce, "nonce")
        if int(nonce) in self._used_nonces:
            raise NonceReuseError("Nonce was already used by this prover")

        commitment = self.params.commit(nonce)
        self._used_nonces.add(int(nonce))
        self._nonce = nonce
        self.state = SessionState.COMMITTED
        return commitment

    def _fresh_nonce(self):
        # Only reachable with toy-sized groups.
        if len(self._used_nonces) >= self.params.q:
            raise NonceReuseError("Every nonce in [0, q) was already used")
        while True:
            nonce = self.params.random_exponent(self.rng)
            if int(nonce) not in self._used_nonces:
                return nonce

    def compute_response(self, challenge):
        """
        Answer the challenge and close the session.

        Returns:
            The response :math:`s = (r - c x) \\bmod q`.
        """
        if self.state is not SessionState.COMMITTED:
            raise SessionStateError("Cannot respond before committing")

        response = self.params.response(self._nonce, challenge, self.secret)
        self._nonce = None
        self.state = SessionState.RESPONDED
        return response

    def simulate(self, challenge=None):
        """Produce a simulated transcript for this prover's public keys."""
        return simulate_transcript(self.params, self.public_keys, challenge, self.rng)


class Verifier:
    """
    Verifier side of the protocol.

    A verifier object runs a single session: it receives a commitment, issues a challenge, and
    checks the response once.

    Args:
        params (:py:class:`cpzk.group.GroupParameters`): Group parameters.
        public_keys (:py:class:`cpzk.group.PublicKeys`): The prover's public keys.
        rng: Optional source of randomness for challenges.

    Raises:
        ValidationError: If a public key is not an element of the subgroup.
    """

    def __init__(self, params, public_keys, rng=None):
        self.params = params
        self.public_keys = public_keys
        self.rng = rng
        self.validate_public_keys()

        self.state = SessionState.INIT
        self.commitment = None
        self.challenge = None
        self.response = None

    def validate_public_keys(self):
        for name, value in (("y1", self.public_keys.y1), ("y2", self.public_keys.y2)):
            if not self.params.is_element(value):
                raise ValidationError("Public key {} is not in the subgroup".format(name))

    def send_challenge(self, commitment, challenge=None):
        """
        Store the received commitment and generate a challenge.

        The challenge is chosen at random from :math:`[0, q)` unless the caller supplies it.

        Args:
            commitment (:py:class:`cpzk.group.Commitment`): The prover's commitment.
            challenge: Optional externally chosen challenge.
        """
        if self.state is not SessionState.INIT:
            raise SessionStateError("Challenge was already issued")

        if challenge is None:
            challenge = self.params.random_exponent(self.rng)
        self.commitment = commitment
        self.challenge = ensure_bn(challenge)
        self.state = SessionState.CHALLENGED
        return self.challenge

    def verify(self, response):
        """
        Verify the response of an interactive session.

        Args:
            response: The response given by the prover.

        Returns:
            bool: True if verification succeeded, False otherwise.
        """
        if self.state is not SessionState.CHALLENGED:
            raise SessionStateError("Nothing to verify")

        self.response = ensure_bn(response)
        self.state = SessionState.VERIFIED
        return self.verify_transcript(self.transcript)

    @property
    def transcript(self):
        if self.response is None:
            return None
        return Transcript(
            commitment=self.commitment, challenge=self.challenge, response=self.response
        )

    def verify_transcript(self, transcript):
        """Check a recorded or simulated transcript against the public keys."""
        commitment = transcript.commitment
        return self.params.verify(
            commitment.t1,
            commitment.t2,
            transcript.challenge,
            transcript.response,
            self.public_keys.y1,
            self.public_keys.y2,
        )
