from collections.abc import Iterator, Mapping
from contextlib import contextmanager


@contextmanager
def scoped_environment(base: Mapping[str, str], **overrides: str) -> Iterator[dict[str, str]]:
    """Yield a private copy of ``base`` extended with ``overrides``.

    The mapping is meant to be handed to a child process as its ``env``. It is
    emptied when the scope exits so that nothing outlives the task using it;
    the parent process environment is never touched.
    """
    env = dict(base)
    env.update(overrides)
    try:
        yield env
    finally:
        env.clear()
