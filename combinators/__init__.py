# Generic function combinators
from .compose import compose, compose_all, identity, pipe, tap, trace

__all__ = [
    'identity', 'compose',
    'compose_all', 'pipe', 'tap', 'trace',
]
