"""
Exception types which the Fast Forms machinery deals in.

Everything here descends from LanguageError, so a caller who only cares that
"the text was no good" has exactly one thing to catch. The finer distinctions
matter mostly for tooling and tests:

	* GrammarFault and UnknownRule mean the dialect itself is broken. Those
	  are found by the validation pass, before any text gets parsed.
	* ParseFailure and TrailingInput mean the text does not conform to the dialect.
	* SemanticRejection means a semantic action refused a perfectly good match.
	* RenderTypeMismatch means somebody handed the renderer the wrong thing.
"""

from typing import Iterable
from ..support.failureprone import SourceText

class LanguageError(ValueError):
	""" Base class of all exceptions arising from the language machinery. """

class GrammarFault(LanguageError):
	""" The dialect's table of part definitions is not well-formed. """

class UnknownRule(GrammarFault):
	""" Something refers to a part definition by a name the dialect does not define. """
	def __init__(self, name:str, referrer:str=None):
		if referrer is None: message = "Undefined rule %r." % name
		else: message = "Rule %r refers to undefined rule %r." % (referrer, name)
		super().__init__(message)
		self.name, self.referrer = name, referrer

class ParseFailure(LanguageError):
	"""
	The text does not match the dialect.

	rule: the name of the rule which was being matched when matching was abandoned.
	position: the character offset concerned.
	line, column: the same position, for people. (Both count from one.)
	expected: names of the terminals which could have matched at the farthest point reached.
	"""
	def __init__(self, rule:str, position:int, source:SourceText, expected:Iterable[str]=()):
		self.rule = rule
		self.position = position
		self.expected = tuple(sorted(expected))
		self.line, column = source.find_row_col(position)
		self.column = column + 1
		super().__init__(source.complaint(slice(position, position + 1), self.describe()))

	def describe(self) -> str:
		message = "Text does not match rule %r" % self.rule
		if self.expected: message += "; expected %s" % ' or '.join(self.expected)
		return message + "."

class TrailingInput(ParseFailure):
	""" The root rule matched, but it did not account for all the text. Position is the first unconsumed non-blank character. """
	def describe(self) -> str:
		message = "Unexpected text after the end of %r" % self.rule
		if self.expected: message += "; expected %s" % ' or '.join(self.expected)
		return message + "."

class SemanticRejection(LanguageError):
	""" A semantic action refused to accept an otherwise-successful match. Fatal to the parse. """
	def __init__(self, rule:str, reason:str, position:int=None):
		if position is None: message = "Rule %r rejected its match: %s" % (rule, reason)
		else: message = "Rule %r rejected its match at offset %d: %s" % (rule, position, reason)
		super().__init__(message)
		self.rule, self.reason, self.position = rule, reason, position

class RenderTypeMismatch(LanguageError, TypeError):
	""" The renderer was handed something other than a form model. """
