import random
import string

ALPHABET = string.ascii_letters + string.digits


def make_random_string(length: int, rng: random.Random | None = None) -> str:
    """
    Generate a random alphanumeric string.

    Args:
        length: Number of characters; zero or negative gives "".
        rng: Source of randomness, e.g. `random.Random(seed)` for a
            reproducible result. Defaults to the process-wide `random` state.

    Returns:
        A string of `length` characters drawn from [a-zA-Z0-9].
    """
    if length <= 0:
        return ""
    choices = rng.choices if rng is not None else random.choices
    return "".join(choices(ALPHABET, k=length))
