import hmac
from typing import Optional


def check_password(candidate: Optional[str], secret: Optional[str]) -> bool:
    """
    Compare a submitted password against the single configured secret.
    An unset/empty secret rejects every attempt.
    """
    if not secret or candidate is None:
        return False
    return hmac.compare_digest(candidate.encode("utf-8"), secret.encode("utf-8"))
