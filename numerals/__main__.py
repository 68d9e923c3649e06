"""
Converts the given values, arabic numbers into roman numerals and roman
numerals into arabic numbers.
"""

from argparse import ArgumentParser
import json
import re
import sys

from .roman import to_number, to_numeral
from .validation import NumeralError, validate_numeral, validate_range


arabic_re = re.compile(r'[+-]?[0-9]+')


def convert_value(value):
    if arabic_re.fullmatch(value):
        return to_numeral(int(value))
    return to_number(value)


def check_value(value):
    if arabic_re.fullmatch(value):
        validate_range(int(value))
    else:
        validate_numeral(value)
    return 'ok'


def main(argv=None):
    p = ArgumentParser(prog='numerals', description=__doc__.strip())
    p.add_argument('values', nargs='+', metavar='VALUE')
    p.add_argument('--check', action='store_true', default=False,
                   help="only validate the values, don't convert them")
    p.add_argument('--json', action='store_true', default=False,
                   help="print the results as a JSON list")
    args = p.parse_args(argv)

    process = check_value if args.check else convert_value
    results = []
    failed = 0
    for value in args.values:
        try:
            output, error = process(value), None
        except NumeralError as e:
            output, error = None, str(e)
            failed += 1
            print('!> %s: %s' % (value, error), file=sys.stderr)
        results.append({'input': value, 'output': output, 'error': error})

    if args.json:
        print(json.dumps(results, indent=4, sort_keys=True))
    else:
        for r in results:
            if r['error'] is None:
                print(r['output'])

    if failed:
        raise SystemExit(1)


if __name__ == '__main__':
    main()
