__version__ = "0.1.0"
__title__ = "cpzk"
__author__ = "cpzk contributors"
__license__ = "MIT"
__description__ = "Chaum-Pedersen zero-knowledge proofs of equal discrete logarithms."
__copyright__ = "2026, cpzk contributors"


from cpzk.group import GroupParameters, PublicKeys, Commitment, DEFAULT_GROUP, toy_group
from cpzk.base import Prover, Verifier, Transcript, simulate_transcript
from cpzk.extractor import extract_secret
