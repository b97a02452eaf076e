"""
These most-fundamental classes are separate from the rest
to avoid circular imports: the syntax, the type algebra,
and the inference passes all refer to them.
"""

class Phrase:
	""" Any node of an expression tree. """
	def __str__(self):
		from .syntax import Transcript
		return Transcript(self).text

class ValueExpression(Phrase): pass


class InferenceError(Exception):
	"""
	Base of every way inference can fail.
	`at` is the expression being inferred when the trouble was noticed, if known.
	"""
	at: ValueExpression = None

