import sys
import logging
import argparse
import configparser
import functools
from pathlib import Path

from blessed import Terminal
import pyperclip

from .assembler import PasswordAssembler
from .catalog import GeneratorCatalog, SCHEME_NAMES
from .errors import ConfigurationError
from .wordlist import load_wordlist

log = logging.getLogger(__name__)

DATA_DIR = Path('~/.pwbits')
DEFAULT_BITS = 40
DEFAULT_SCHEME = 'words'


class Config:

    def __init__(self, config_file):
        self.bits = None
        self.scheme = None
        self.wordlist = None
        self.load(config_file)

    def load(self, config_file):
        config_file = Path(config_file).expanduser()
        if not config_file.exists():
            return
        log.debug("Loading config %s", config_file)
        config = configparser.ConfigParser()
        config.read(config_file, encoding='utf-8')
        for section in config.sections():
            if section != 'pwbits':
                print(f"WARNING: unknown section {section!r} in config {str(config_file)!r}")
                continue
            section = config[section]
            for key in section:
                if key == 'bits':
                    try:
                        self.bits = section.getfloat(key)
                    except ValueError:
                        raise ConfigurationError(
                            f"Invalid bits {section[key]!r} in config {str(config_file)!r}") from None
                elif key == 'scheme':
                    self.scheme = section[key]
                elif key == 'wordlist':
                    self.wordlist = Path(section[key]).expanduser()
                else:
                    print(f"WARNING: unknown key [{section.name!r}] {key!r} in config {str(config_file)!r}")
                    continue


def _copy(text):
    """Wraps copy-to-clipboard function to allow overriding."""
    pyperclip.copy(text)


def make_catalog(wordlist=None) -> GeneratorCatalog:
    if wordlist is None:
        return GeneratorCatalog()
    return GeneratorCatalog(words=functools.partial(load_wordlist, str(wordlist)))


def run_list(catalog):
    term = Terminal(stream=sys.stdout)
    for name in catalog.names():
        scheme = catalog[name]
        print(term.bold(name.ljust(26)),
              "%6.2f bits per part" % scheme.generator.entropy())


def run_generate(catalog, scheme_name, bits, count=1, copy=False):
    term = Terminal(stream=sys.stdout)
    password = None
    for _ in range(count):
        password = PasswordAssembler.run(scheme_name, bits, catalog)
        print("Your Secure Password is:", term.bold(password.text))
        print("Bits Entropy of Security: %.2f" % password.bits)
        print("Length:", password.length)
    if copy and password is not None:
        _copy(password.text)
        print("Copied to clipboard.")


def parse_args(argv=None):
    """Process command line args."""
    ap = argparse.ArgumentParser(prog="pwbits",
                                 description="Generate passwords with at least given bits of entropy",
                                 formatter_class=argparse.RawTextHelpFormatter)
    ap.add_argument('-b', '--bits', type=float,
                    help=f"minimal bits of entropy (default: {DEFAULT_BITS})")
    ap.add_argument('-w', '--with', dest='scheme', choices=SCHEME_NAMES, metavar='SCHEME',
                    help=f"password scheme, one of:\n{', '.join(SCHEME_NAMES)}\n"
                         f"(default: {DEFAULT_SCHEME})")
    ap.add_argument('-n', dest='count', type=int, default=1,
                    help="number of passwords to generate (default: %(default)s)")
    ap.add_argument('--wordlist', type=str,
                    help="word list file, one word per line "
                         "(default: system dictionary)")
    ap.add_argument('-c', '--config', dest='config_file',
                    default=DATA_DIR / 'pwbits.conf',
                    help="config file (default: %(default)s)")
    ap.add_argument('--copy', action='store_true',
                    help="copy the (last) password to clipboard")
    ap.add_argument('--list', dest='list_schemes', action='store_true',
                    help="list available schemes and exit")
    ap.add_argument('-v', '--verbose', action='store_true',
                    help="print debug messages")
    return ap.parse_args(args=argv)


def main(argv=None):
    """Main program

    :param argv: Used in tests. Default is sys.argv
    :return: Exit status
    """
    args = parse_args(argv)
    if args.verbose:
        logging.basicConfig(level='DEBUG')
    try:
        if args.count < 1:
            raise ConfigurationError(f"Number of passwords must be positive, got {args.count}")
        cfg = Config(args.config_file)
        catalog = make_catalog(args.wordlist or cfg.wordlist)
        if args.list_schemes:
            run_list(catalog)
            return 0
        run_generate(catalog,
                     scheme_name=args.scheme or cfg.scheme or DEFAULT_SCHEME,
                     bits=next(b for b in (args.bits, cfg.bits, DEFAULT_BITS) if b is not None),
                     count=args.count,
                     copy=args.copy)
    except ConfigurationError as e:
        print("Error:", e, file=sys.stderr)
        return 2
    return 0
