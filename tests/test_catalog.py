import math
import threading
import time

import pytest

from pwbits import catalog as catalog_module
from pwbits.catalog import GeneratorCatalog, Scheme, SCHEME_NAMES, default_catalog
from pwbits.composite import CapitalizeGenerator
from pwbits.pickers import CharPicker, WordListPicker
from pwbits.errors import ConfigurationError

WORDS = ['apple', 'banana', 'cherry', 'damson']


@pytest.fixture()
def catalog():
    return GeneratorCatalog(words=WORDS)


def test_names(catalog):
    assert catalog.names() == SCHEME_NAMES
    assert len(catalog) == len(SCHEME_NAMES)
    assert list(catalog) == list(SCHEME_NAMES)
    assert 'words' in catalog
    assert 'nope' not in catalog


def test_unknown_scheme(catalog):
    with pytest.raises(ConfigurationError, match="Unknown scheme 'nope'"):
        catalog.get('nope')
    with pytest.raises(ConfigurationError):
        catalog['']


@pytest.mark.parametrize("name, bits, separator", [
    ('words', 2.0, ' '),
    ('words_numbers', 2.0, math.log2(10)),
    ('words_shiftnumbers', 2.0, math.log2(20)),
    ('words_symbols', 2.0, math.log2(32)),
    ('words_cases', 2.0, ' '),
    ('words_cases_numbers', 2.0, math.log2(10)),
    ('words_cases_shiftnumbers', 2.0, math.log2(20)),
    ('ascii', math.log2(95), ''),
    ('ascii_lower', math.log2(69), ''),
    ('lower_number', math.log2(36), ''),
])
def test_scheme_composition(catalog, name, bits, separator):
    scheme = catalog[name]
    assert isinstance(scheme, Scheme)
    assert scheme.name == name
    assert scheme.generator.entropy() == pytest.approx(bits)
    if isinstance(separator, str):
        assert scheme.separator == separator
    else:
        assert isinstance(scheme.separator, CharPicker)
        assert scheme.separator.entropy() == pytest.approx(separator)


def test_case_schemes_wrap_words(catalog):
    for name in ('words_cases', 'words_cases_numbers', 'words_cases_shiftnumbers'):
        assert isinstance(catalog[name].generator, CapitalizeGenerator)
    assert isinstance(catalog['words'].generator, WordListPicker)


def test_shared_wordlist():
    calls = []

    def provider():
        calls.append(1)
        return WORDS

    catalog = GeneratorCatalog(words=provider)
    for name in catalog:
        if name.startswith('words'):
            catalog[name].generator.generate()
    assert calls == [1]


def test_built_once(catalog):
    assert catalog['ascii'] is catalog['ascii']
    assert catalog.schemes is catalog.schemes


def test_default_catalog():
    assert default_catalog() is default_catalog()


def test_case_schemes_fold_case_variants():
    catalog = GeneratorCatalog(words=['Bob', 'bob', 'ann'])
    assert catalog['words'].generator.entropy() == pytest.approx(math.log2(3))
    assert catalog['words_cases'].generator.entropy() == 1.0
    outputs = set()
    for _ in range(400):
        value = catalog['words_cases'].generator.generate()
        outputs.add(value.text)
        assert value.bits == 3.0
    # 2 words, 4 case variants each, no output reachable twice
    assert len(outputs) <= 8
    assert all(text.lower() in ('bob', 'ann') for text in outputs)


def test_concurrent_catalog_loads_words_once():
    calls = []
    start = threading.Barrier(8)

    def provider():
        calls.append(1)
        time.sleep(0.05)
        return WORDS

    catalog = GeneratorCatalog(words=provider)

    def worker(name):
        start.wait()
        catalog[name].generator.entropy()

    names = ['words', 'words_cases', 'words_numbers', 'words_cases_numbers'] * 2
    threads = [threading.Thread(target=worker, args=(name,)) for name in names]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert calls == [1]


def test_concurrent_default_catalog(monkeypatch):
    created = []
    base = catalog_module.GeneratorCatalog

    class CountingCatalog(base):
        def __init__(self):
            created.append(1)
            time.sleep(0.05)
            base.__init__(self)

    monkeypatch.setattr(catalog_module, '_default_catalog', None)
    monkeypatch.setattr(catalog_module, 'GeneratorCatalog', CountingCatalog)
    start = threading.Barrier(8)
    results = []

    def worker():
        start.wait()
        results.append(catalog_module.default_catalog())

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert created == [1]
    assert all(c is results[0] for c in results)
