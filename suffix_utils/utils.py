import hashlib
import os
import pickle
from functools import wraps

import numpy as np

from .exceptions import InvalidInputError


class DirectoryHelper:

    def __init__(self, arg):
        if arg is None or isinstance(arg, str):
            self.path = arg
        elif isinstance(arg, os.PathLike):
            self.path = os.fspath(arg)
        elif isinstance(arg, DirectoryHelper):
            self.path = arg.path
        else:
            raise ValueError(f"expect a path or DirectoryHelper, got {type(arg).__name__}")

    def get_path(self, filename: str):
        return os.path.join(self.path, filename) if self.path else None

    def makedirs(self):
        if self.path is not None:
            os.makedirs(self.path, exist_ok=True)


class NumpyCache:

    @classmethod
    def tofile(cls, path, makedirs: bool = True):
        def decorator(func):
            @wraps(func)
            def new_func(*args, **kwargs):
                path_str = path(*args, **kwargs) if callable(path) else path
                if not path_str:
                    return func(*args, **kwargs)

                if os.path.isfile(path_str):
                    print(f"load from '{path_str}'")
                    return cls.load_data(path_str)

                data = func(*args, **kwargs)
                if makedirs:
                    os.makedirs(os.path.dirname(path_str) or '.', exist_ok=True)
                print(f"cache to '{path_str}'")
                cls.save_data(data, path_str)
                return data
            return new_func

        return decorator

    @staticmethod
    def load_data(path):
        with np.load(path) as archive:
            return archive['data']

    @staticmethod
    def save_data(data, path):
        np.savez_compressed(path, data=data)


def as_text(seq):
    """Normalize a text (or pattern) to an immutable, sliceable sequence.

    `str` and `bytes` are kept, other byte buffers become `bytes` and any other
    iterable of tokens becomes a `tuple`.
    """
    if seq is None:
        raise InvalidInputError("text must not be None")
    if isinstance(seq, (str, bytes)):
        return seq
    if isinstance(seq, (bytearray, memoryview)):
        return bytes(seq)
    try:
        return tuple(seq)
    except TypeError as e:
        raise InvalidInputError(f"expect a sequence of symbols, got {type(seq).__name__}") from e


def as_pattern(pattern, text):
    """Normalize `pattern` to the kind of `text`.

    Against a token text any iterable is a sequence of tokens, so a `str` pattern
    is split into characters: search `['the']` rather than `'the'` for a word token.
    """
    if isinstance(text, tuple) and pattern is not None:
        pattern = as_text(pattern)
        return pattern if isinstance(pattern, tuple) else tuple(pattern)

    pattern = as_text(pattern)
    if type(pattern) is not type(text):
        raise InvalidInputError(
            f"can't search a {type(pattern).__name__} pattern in a {type(text).__name__} text",
        )
    return pattern


def symbol_codes(text) -> np.ndarray:
    """Comparable array of symbols, order preserving w.r.t. `text`."""
    if isinstance(text, str):
        return np.fromiter(map(ord, text), dtype=np.int64, count=len(text))
    if isinstance(text, bytes):
        return np.frombuffer(text, dtype=np.uint8)
    try:
        token2idx = {token: i for i, token in enumerate(sorted(set(text)))}
    except TypeError as e:
        raise InvalidInputError("tokens must be hashable and mutually comparable") from e
    return np.fromiter((token2idx[token] for token in text), dtype=np.int64, count=len(text))


def text_digest(text) -> str:
    if isinstance(text, str):
        payload = text.encode('utf-8', 'surrogatepass')
    elif isinstance(text, bytes):
        payload = text
    else:
        payload = pickle.dumps(text)
    return hashlib.sha1(type(text).__name__.encode() + b':' + payload).hexdigest()
