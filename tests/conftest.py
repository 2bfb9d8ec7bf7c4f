import pytest

SENTENCE = "Lorem ipsum dolor sit amet consectetur adipiscing elit sed do eiusmod tempor. "


def make_prose(n: int) -> str:
    """Plain prose of exactly ``n`` characters, already normalized."""
    text = SENTENCE * (n // len(SENTENCE) + 1)
    return text[: n - 1] + "."


@pytest.fixture
def prose():
    return make_prose
