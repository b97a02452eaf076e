"""
This is the demonstration driver for polytype, a Hindley-Milner type inferencer.

For example:

    polytype

will infer the type of every example program, or else explain why not.

    polytype -l

will list the examples by name, and

    polytype -vv factorial

will show the inner workings of inference on just the one.
"""
import sys, argparse
from typing import Optional
from .algebra import Term, render

parser = argparse.ArgumentParser(
	prog="polytype",
	description=__doc__,
	formatter_class=argparse.RawDescriptionHelpFormatter,
)
parser.add_argument("example", nargs="*", help="which examples to run; all of them if none are named.")
parser.add_argument('-l', "--list", action="store_true", help="List the examples by name and stop.")
parser.add_argument('-v', "--verbose", action="count", default=0, help="Say more. Twice traces unification.")
parser.add_argument("--max-issues", type=int, default=30, help="Give up after this many failed examples.")

def try_to_infer(expr, env, report) -> Optional[Term]:
	"""
	Infer one expression, printing its type on success.
	On failure, tell the report and carry on: the environment is as it was.
	"""
	from .inference import infer, UndefinedSymbol
	from .unification import TypeMismatch, RecursiveUnification
	try:
		typ = infer(expr, env, report)
	except UndefinedSymbol as ex:
		report.undefined_symbol(expr, ex)
	except RecursiveUnification as ex:
		report.recursive_unification(expr, ex)
	except TypeMismatch as ex:
		report.type_mismatch(expr, ex)
	else:
		print("%s : %s" % (expr, render(typ)))
		return typ

def run(args):
	from .diagnostics import Report, TooManyIssues
	from .primitive import environment
	from .zoo import EXAMPLES
	if args.list:
		for name in EXAMPLES: print(name)
		return
	unknown = [name for name in args.example if name not in EXAMPLES]
	if unknown:
		print("No such example: %s. Try -l for a list." % ", ".join(unknown), file=sys.stderr)
		return 2
	report = Report(verbose=args.verbose, max_issues=args.max_issues)
	env = environment()
	try:
		for name in args.example or EXAMPLES:
			report.info("Inferring", name)
			try_to_infer(EXAMPLES[name], env, report)
	except TooManyIssues:
		report.complain_to_console()
		print(" *"*35, file=sys.stderr)
		print("Giving up after a few issues. One crisis at a time, eh?", file=sys.stderr)
		return 1
	if report.sick():
		report.complain_to_console()
		return 1

def main(argv=None):
	sys.exit(run(parser.parse_args(argv)))
