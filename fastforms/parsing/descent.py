"""
A recursive-descent matcher driven by a Dialect.

The approach is the one usually called a parsing expression grammar (PEG):
alternatives are an ordered choice, so the first alternative to match wins and
there is never any ambiguity to resolve. The price is that the grammar's author
must put alternatives in a sensible order. Since dialects are written by hand,
once, that is a fair trade.

Repetition and option are greedy and never reconsidered. That is normal PEG
behavior and makes for a matcher with no surprises in its running time, which
is linear in practice for dialects of the line-oriented sort this is meant for.

As each composite rule matches in full, its handler (if it has one) gets called
with the new part and with the model under construction. Handlers therefore fire
bottom-up, in the order the corresponding text appears. A handler should only be
attached to a rule whose matches are never later discarded by backtracking. The
root rule's repeated children qualify.

For error reporting, the matcher keeps track of the farthest point at which any
terminal failed to match, and which terminals were tried there. When text turns
out not to conform to the dialect, that is usually the most helpful place to point.
"""

import re, sys
from typing import NamedTuple, Optional, Callable

from ..support.failureprone import SourceText
from .grammar import Dialect, PartDefinition, FaultHandler, SimpleFaultHandler
from .interface import LanguageError, ParseFailure, TrailingInput, SemanticRejection

VERBOSE = False

BLANKS = re.compile(r'\s*')

class Part(NamedTuple):
	"""
	A node in the match tree.
	Terminals get a value and no constituents; composites get constituents and no value.
	`start` and `stop` delimit the text that was matched.
	"""
	name: str
	value: Optional[str]
	constituents: tuple
	start: int
	stop: int

Handler = Callable[[Part, object], object]

def bind_handlers(dialect:Dialect, builder, fault_handler:FaultHandler=SimpleFaultHandler()) -> dict[str, Handler]:
	"""
	Connect the handler names mentioned in a dialect to the methods of a builder object.
	A rule with `handler='foo'` binds to `builder.parse_foo(part, model)`.
	Checking everything up front means the method lookup can never fail mid-parse.
	"""
	bindings = {}
	for d in dialect:
		if d.handler is None: continue
		method_name = 'parse_' + d.handler
		try: bindings[d.name] = getattr(builder, method_name)
		except AttributeError: fault_handler.missing_handler(d.name, method_name)
	return bindings

class Matcher:
	""" One of these per parse: it holds the text, the model, and the error-reporting state. """
	def __init__(self, dialect:Dialect, handlers:dict[str, Handler], text:str, model):
		self.__dialect = dialect
		self.__handlers = handlers
		self.__text = text
		self.__model = model
		self.farthest = 0
		self.expected = set()

	def match(self, name:str, position:int):
		"""
		Try to match the named rule at the given position.
		Returns None on failure, or else a pair (part, new_position).
		For an ignored rule, the part is None but the position still advances.
		"""
		definition = self.__dialect[name]
		if definition.is_terminal(): outcome = self.__match_terminal(definition, position)
		else: outcome = self.__match_composite(definition, position)
		if outcome is None or not definition.ignore: return outcome
		return None, outcome[1]

	def __match_terminal(self, definition:PartDefinition, position:int):
		m = definition.pattern.match(self.__text, position)
		if m is None:
			self.__note_failure(definition.name, position)
			return None
		value = m.group() if definition.format_match is None else definition.format_match(m)
		return Part(definition.name, value, (), position, m.end()), m.end()

	def __match_composite(self, definition:PartDefinition, position:int):
		for alternative in definition.alternatives:
			outcome = self.__match_sequence(alternative, position)
			if outcome is not None:
				constituents, stop = outcome
				part = Part(definition.name, None, constituents, position, stop)
				if VERBOSE: print("Matched %r at %d..%d" % (definition.name, position, stop), file=sys.stderr)
				if definition.name in self.__handlers: self.__call_handler(part)
				return part, stop
		return None

	def __match_sequence(self, alternative, position:int):
		constituents = []
		for c in alternative:
			if c.is_repeated():
				while True:
					outcome = self.match(c.name, position)
					if outcome is None or outcome[1] == position: break
					part, position = outcome
					if part is not None: constituents.append(part)
			else:
				outcome = self.match(c.name, position)
				if outcome is None:
					if c.is_optional(): continue
					return None
				part, position = outcome
				if part is not None: constituents.append(part)
		return tuple(constituents), position

	def __call_handler(self, part:Part):
		try: self.__handlers[part.name](part, self.__model)
		except LanguageError: raise
		except Exception as ex:
			raise SemanticRejection(part.name, "%s: %s" % (type(ex).__name__, ex), part.start) from ex

	def __note_failure(self, name:str, position:int):
		if position > self.farthest:
			self.farthest = position
			self.expected = {name}
		elif position == self.farthest:
			self.expected.add(name)

def parse(dialect:Dialect, handlers:dict[str, Handler], text:str, model, *, filename:str=None) -> Part:
	"""
	Match the whole text against the dialect's root rule, feeding the model through the handlers.
	Returns the root part. Raises ParseFailure (or TrailingInput) if the text does not conform.
	"""
	matcher = Matcher(dialect, handlers, text, model)
	outcome = matcher.match(dialect.root, 0)
	if outcome is None:
		raise ParseFailure(dialect.root, matcher.farthest, SourceText(text, filename=filename), matcher.expected)
	part, stop = outcome
	rest = BLANKS.match(text, stop).end()
	if rest < len(text):
		expected = matcher.expected if matcher.farthest >= rest else ()
		raise TrailingInput(dialect.root, rest, SourceText(text, filename=filename), expected)
	return part
