import os
from unittest.mock import Mock

import numpy as np
import pytest

from ..exceptions import InvalidInputError
from ..utils import DirectoryHelper, NumpyCache, as_pattern, as_text, symbol_codes, text_digest


def test_cache(tmpdir):
    data = np.random.choice(100, size=[100])
    filename = os.path.join(tmpdir, 'test.npz')
    create = Mock(return_value=data)
    wrapped_create = NumpyCache.tofile(filename)(create)

    np.testing.assert_array_equal(wrapped_create(), data)
    assert os.path.isfile(filename)  # save to file
    assert create.call_count == 1

    np.testing.assert_array_equal(wrapped_create(), data)
    assert create.call_count == 1  # load from file, don't create again


def test_cache_dynamic(tmpdir):
    data = np.arange(3)
    create = Mock(return_value=data)
    wrapped_create = NumpyCache.tofile(
        path=lambda key: (
            os.path.join(tmpdir, key) if key.endswith('.npz')
            else None
        ),
    )(create)

    np.testing.assert_array_equal(wrapped_create('a.npz'), data)
    assert create.call_count == 1
    np.testing.assert_array_equal(wrapped_create('a.npz'), data)
    assert create.call_count == 1  # load from file, don't create again

    np.testing.assert_array_equal(wrapped_create('c'), data)
    assert create.call_count == 2
    assert not os.path.isfile(os.path.join(tmpdir, 'c'))  # condition return False


def test_directory_helper(tmpdir):
    helper = DirectoryHelper(os.path.join(tmpdir, 'cache'))
    assert DirectoryHelper(helper).path == helper.path
    helper.makedirs()
    assert os.path.isdir(helper.path)
    assert DirectoryHelper(None).get_path('a.npz') is None
    with pytest.raises(ValueError):
        DirectoryHelper(123)


@pytest.mark.parametrize(
    'seq, expected',
    [
        ('abc', 'abc'),
        (b'abc', b'abc'),
        (bytearray(b'abc'), b'abc'),
        ([1, 2], (1, 2)),
        (iter('ab'), ('a', 'b')),
    ],
)
def test_as_text(seq, expected):
    assert as_text(seq) == expected


@pytest.mark.parametrize('seq', [None, 1.5])
def test_as_text_invalid(seq):
    with pytest.raises(InvalidInputError):
        as_text(seq)


def test_as_pattern():
    assert as_pattern([1], (1, 2)) == (1,)
    assert as_pattern('ab', ('a', 'b')) == ('a', 'b')
    assert as_pattern(memoryview(b'ab'), b'abc') == b'ab'
    with pytest.raises(InvalidInputError):
        as_pattern('ab', b'abc')


def test_symbol_codes_preserve_order():
    assert symbol_codes('ba\x00').tolist() == [98, 97, 0]
    assert symbol_codes(b'ba').tolist() == [98, 97]
    assert symbol_codes(('the', 'a', 'the')).tolist() == [1, 0, 1]


def test_text_digest():
    assert text_digest('abc') == text_digest('abc')
    assert text_digest('abc') != text_digest(b'abc')
    assert text_digest((1, 2)) != text_digest((2, 1))
