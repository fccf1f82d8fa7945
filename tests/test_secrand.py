import pytest

from pwbits import backend
from pwbits.secrand import SecureRandom, get_random
from pwbits.errors import RandomnessUnavailable

from .fakes import CountingBytes, chi_squared


def test_backend_randombytes():
    assert len(backend.available_backends) > 0
    data = backend.randombytes(16)
    assert isinstance(data, bytes)
    assert len(data) == 16


def test_backend_unknown_symbol():
    with pytest.raises(AttributeError):
        backend.no_such_symbol


def test_missing_backend(monkeypatch):
    monkeypatch.setattr(backend, 'available_backends', ())
    with pytest.raises(backend.MissingError, match='pynacl or standard'):
        backend.randombytes
    with pytest.raises(RandomnessUnavailable, match='Missing randombytes'):
        SecureRandom().next_index(10)


def test_backend_priority():
    names = [b.__name__.split('.')[-1] for b in backend.available_backends]
    assert names[-1] == 'standard'
    assert backend.randombytes is backend.available_backends[0].randombytes


def test_next_index_range():
    rng = get_random()
    for n in (1, 2, 3, 10, 255, 256, 257, 100_000):
        for _ in range(50):
            assert 0 <= rng.next_index(n) < n


def test_next_index_one_consumes_nothing():
    source = CountingBytes()
    assert SecureRandom(source).next_index(1) == 0
    assert source.calls == 0


def test_next_index_rejects_out_of_range():
    # n=5 -> 3 bits mask; 0x07 and 0x05 are rejected, 0x02 accepted
    source = CountingBytes(b'\x07', b'\x05', b'\x02')
    assert SecureRandom(source).next_index(5) == 2
    assert source.calls == 3


def test_next_index_masks_high_bits():
    source = CountingBytes(b'\xf3')
    assert SecureRandom(source).next_index(4) == 3


def test_next_index_multibyte():
    source = CountingBytes(b'\x01\x00')
    assert SecureRandom(source).next_index(300) == 256


def test_next_index_invalid():
    with pytest.raises(ValueError):
        get_random().next_index(0)


def test_choice():
    source = CountingBytes(b'\x01')
    assert SecureRandom(source).choice('abc') == 'b'
    with pytest.raises(IndexError):
        get_random().choice('')


def test_source_failure_is_fatal():
    def broken(_size):
        raise OSError("no entropy")

    with pytest.raises(RandomnessUnavailable, match="no entropy"):
        SecureRandom(broken).next_index(10)


def test_short_read_is_fatal():
    with pytest.raises(RandomnessUnavailable):
        SecureRandom(lambda size: b'').next_index(10)


def test_uniform_distribution():
    rng = get_random()
    n, draws = 10, 20_000
    counts = [0] * n
    for _ in range(draws):
        counts[rng.next_index(n)] += 1
    # df=9, p=1e-5 critical value is ~37.0
    assert chi_squared(counts, draws / n) < 40
