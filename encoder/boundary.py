import secrets
import string

# Uppercase letters are left out until browsers agree on case-sensitive boundaries.
# Ref.: https://github.com/whatwg/html/issues/6251
ALPHABET = string.ascii_lowercase + string.digits
BOUNDARY_SIZE = 16


def create_boundary() -> str:
    """Generate a random boundary token, e.g. `n2vw38xdagaq6lrv`."""
    return "".join(secrets.choice(ALPHABET) for _ in range(BOUNDARY_SIZE))
