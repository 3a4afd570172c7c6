"""
Translate a Fast Forms definition into an HTML5 form fragment.

The notation is line-oriented: an optional block of "- attribute value" lines for the
form itself, then one block per field, each starting with the input type on a line of
its own. Use --grammar to see the rules, or --example to try one of the built-in samples.
"""

import sys, os, argparse

from fastforms.parsing import descent
from fastforms.parsing.interface import LanguageError
from fastforms.forms.runtime import FastForms

def parse_arguments(argv=None):
	parser = argparse.ArgumentParser(prog='py -m fastforms', description=__doc__,)
	parser.add_argument('source_path', nargs='?', help='path to input file')
	parser.add_argument('-f', '--force', action='store_true', dest='force', help='allow to write over existing file')
	parser.add_argument('-o', '--output', help='path to output file; "-" means standard output')
	parser.add_argument('--example', help='render the named built-in example to standard output')
	parser.add_argument('--grammar', action='store_true', help='display the rules of the dialect on STDOUT')
	parser.add_argument('-v', '--verbose', action='store_true', help="Squawk about every rule matched.")
	return parser.parse_args(argv)

def main(args):
	if args.verbose: descent.VERBOSE = True
	fast_forms = FastForms()
	if args.grammar:
		fast_forms.dialect.display()
		return
	if args.example is not None:
		try: document = fast_forms.dialect.examples[args.example]
		except KeyError:
			print('No such example. Try one of: ' + ', '.join(map(repr, fast_forms.dialect.examples)), file=sys.stderr)
			sys.exit(1)
		source_path, target_path = None, '-'
	elif args.source_path is None:
		print('Give a source path, or --example, or --grammar.', file=sys.stderr)
		sys.exit(1)
	else:
		source_path = args.source_path
		target_path = args.output or os.path.splitext(source_path)[0] + '.html'
		if target_path != '-' and os.path.exists(target_path) and not args.force:
			print('Target file already exists and --force command-line argument was not given.', file=sys.stderr)
			sys.exit(1)
		with open(source_path) as fh: document = fh.read()
	try:
		markup = fast_forms.parse(document, filename=source_path)
	except LanguageError as e:
		print(e.args[0], file=sys.stderr)
		sys.exit(1)
	if target_path == '-':
		sys.stdout.write(markup)
	else:
		with open(target_path, 'w') as fh: fh.write(markup)
		print('Wrote form markup to:')
		print('\t' + target_path)

if __name__ == '__main__': main(parse_arguments())
