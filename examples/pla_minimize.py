"""Minimize a PLA file, heuristically or exactly.

Usage: python pla_minimize.py FILE [--exact]
"""
import argparse
import logging

from espresso import Cover
from espresso import EspressoConfig


def main():
    p = argparse.ArgumentParser(description=__doc__)
    p.add_argument('filename', help='input PLA file')
    p.add_argument('--exact', action='store_true',
                   help='compute a minimum cover')
    p.add_argument('--summary', action='store_true',
                   help='log statistics')
    args = p.parse_args()
    if args.summary:
        logging.basicConfig(level=logging.INFO)
    config = EspressoConfig(summary=args.summary)
    cover = Cover.from_pla_file(args.filename)
    if args.exact:
        cover = cover.minimize_exact(config)
    else:
        cover = cover.minimize(config)
    print(cover.to_pla_string(), end='')


if __name__ == '__main__':
    main()
