"""
PKCE (Proof Key for Code Exchange) values for the authorization code flow
"""
from typing import NamedTuple
import base64
import hashlib
import secrets

# 24 random bytes -> 32 url-safe characters
STATE_BYTES = 24
# 96 random bytes -> 128 url-safe characters, the RFC 7636 maximum verifier length
VERIFIER_BYTES = 96
CODE_CHALLENGE_METHOD = "s256"


class PKCEValues(NamedTuple):
    """State token plus code verifier/challenge for one login attempt"""
    state: str
    verifier: str
    challenge: str


def derive_code_challenge(verifier: str) -> str:
    """Return base64url(sha256(verifier)) without padding"""
    digest = hashlib.sha256(verifier.encode("ascii")).digest()
    return base64.urlsafe_b64encode(digest).rstrip(b"=").decode("ascii")


def generate() -> PKCEValues:
    """
    Generate a fresh state token and code verifier, and derive the code challenge.

    Both random values come from the OS CSPRNG via ``secrets``; a failing
    random source raises and is not caught here.
    """
    state = secrets.token_urlsafe(STATE_BYTES)
    verifier = secrets.token_urlsafe(VERIFIER_BYTES)
    return PKCEValues(state=state, verifier=verifier, challenge=derive_code_challenge(verifier))
