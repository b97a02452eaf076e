import sys, random
from typing import Sequence
from boozetools.support.failureprone import illustration
from .ontology import ValueExpression
from .algebra import Render
from .syntax import Transcript

class TooManyIssues(Exception):
	pass

def _outburst():
	particle = ["Oh, ", "Well, ", "Aw, ", "", ""]

	minced_oaths = [
		'Ack', 'ARGH', 'Blargh', 'Confound it', 'Crud', 'Curses', "Crikey",
		'Drat', 'Fiddlesticks', 'Good Grief', "Great Scott", 'Heavens',
		'Jeepers', 'Nuts', 'Rats', 'Woe is me',
	]

	resignations = [
		'These types do not add up.',
		'I cannot make these agree.',
		'Some of this is ill-typed.',
		'I have no idea what the right answer is.',
	]

	return "%s%s! %s"%tuple(map(random.choice, (particle, minced_oaths, resignations)))

class Report:
	"""
	Collects the issues found while inferring a batch of expressions,
	and carries the verbosity level for everything that wants to say something.

	verbose=1 narrates which expression is underway.
	verbose=2 also traces the inner workings of inference and unification.
	"""
	_issues : list["Pic"]

	def __init__(self, *, verbose:int=0, max_issues=3):
		self._verbose = verbose or 0   # Because None is incomparable.
		self._issues = []
		self._max_issues = max_issues

	def ok(self): return not self._issues
	def sick(self): return bool(self._issues)

	def issue(self, it:"Pic"):
		self._issues.append(it)
		if len(self._issues) == self._max_issues:
			raise TooManyIssues(self)

	def reset(self):
		self._issues.clear()

	def info(self, *args):
		if self._verbose:
			print(*args, file=sys.stderr)

	def debug(self, *args):
		if self._verbose > 1:
			print("  ", *args, file=sys.stderr)

	def complain_to_console(self):
		""" Emit all the issues to the console. """
		_bemoan(self._issues)

	def assert_no_issues(self, message):
		""" Does what it says on the tin """
		if self._issues:
			self.complain_to_console()
			raise AssertionError(_outburst()+" "+message)

	# Methods the batch driver calls when inference fails:

	def undefined_symbol(self, expr:ValueExpression, ex):
		transcript = Transcript(expr)
		intro = "Undefined symbol %s" % ex.name
		self.issue(Pic(intro, [Annotation(transcript, ex.at, "not defined here")]))

	def type_mismatch(self, expr:ValueExpression, ex):
		delta = Render()
		intro = "%s: %s != %s" % (ex.gripe, delta(ex.x), delta(ex.y))
		self.issue(Pic(intro, [Annotation(Transcript(expr), ex.at, "these types cannot be made to agree")]))

	def recursive_unification(self, expr:ValueExpression, ex):
		delta = Render()
		intro = "%s: %s in %s" % (ex.gripe, delta(ex.x), delta(ex.y))
		footer = ["A type cannot be part of itself."]
		self.issue(Pic(intro, [Annotation(Transcript(expr), ex.at, "this would need an infinite type")], footer))


class Annotation:
	"""
	Points at one sub-expression within the text of the whole expression.
	Without a sub-expression to point at, it shows the whole text plainly.
	"""
	def __init__(self, transcript:Transcript, node:ValueExpression=None, caption:str=""):
		self.text = transcript.text
		self.slice = transcript.spans.get(node)
		self.caption = caption
	def illustrate(self):
		if self.slice is None:
			return "    "+self.text
		width = self.slice.stop - self.slice.start
		return illustration(self.text, self.slice.start, width, prefix='    ', caption=self.caption)

class Pic:
	def __init__(self, intro:str, anns:list[Annotation], footer:Sequence[str]=()):
		self._intro, self._anns, self._footer = intro, anns, footer
	def as_text(self):
		lines = [self._intro, ""]
		lines.extend(ann.illustrate() for ann in self._anns)
		lines.extend(self._footer)
		return '\n'.join(lines)

def _bemoan(issues):
	""" Emit all the issues to the console. """
	if issues:
		print("*"*60, file=sys.stderr)
		print(_outburst(), file=sys.stderr)
	for i in issues:
		print("  -"*20, file=sys.stderr)
		print(i.as_text(), file=sys.stderr)
	sys.stderr.flush()
