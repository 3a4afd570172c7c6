"""
# Part Definitions and Dialects

A dialect is a table of named part definitions, plus a little metadata for people
and tooling: a title, a description, a version number, and some worked examples.

Each part definition is one of exactly two kinds:
	* A terminal carries a regular expression, which is matched directly against the text.
	  Optionally, a `format_match` function turns the match object into the part's value.
	  (Otherwise the value is just the matched text.)
	* A composite carries one or more alternatives. Each alternative is a sequence of
	  constituents, which are references to other part definitions by name.

A constituent reference may carry a quantifier suffix, just like in a regular expression:
	* `foo?` means zero or one `foo`.
	* `foo*` means zero or more `foo`.
	* plain `foo` means exactly one.
Rule names may contain spaces, so the suffix is the only thing that is special.

Either kind may be marked `ignore`, meaning that it matches (and consumes text) as usual
but contributes no node to the resulting tree. That is how punctuation and line breaks
stay out of the way of the semantic actions.

A composite may also name a `handler`. The matcher calls the handler every time the
rule matches in full. Handlers are named rather than embedded, so that a dialect can
be a plain read-only table: the names get bound to methods of some builder object
separately. (See `descent.bind_handlers`.)

Because the table is written by hand, it can be wrong. `Dialect.validate` checks it
over before anybody relies on it, reporting problems to a FaultHandler.
"""

import re
from typing import NamedTuple, Optional, Callable, Protocol, Iterable

from ..support import foundation, pretty
from .interface import GrammarFault, UnknownRule

OPTIONAL, REPEATED = '?', '*'

class Constituent(NamedTuple):
	""" A reference from within a composite to some other part definition. """
	name: str
	quantifier: Optional[str] = None

	@classmethod
	def parse(cls, text:str):
		if text.endswith((OPTIONAL, REPEATED)): return cls(text[:-1], text[-1])
		return cls(text)

	def is_optional(self): return self.quantifier == OPTIONAL
	def is_repeated(self): return self.quantifier == REPEATED

	def __str__(self): return self.name + (self.quantifier or '')

class PartDefinition(NamedTuple):
	name: str
	description: str = ''
	alternatives: tuple[tuple[Constituent, ...], ...] = ()
	pattern: Optional[re.Pattern] = None
	format_match: Optional[Callable[[re.Match], str]] = None
	ignore: bool = False
	handler: Optional[str] = None

	def is_terminal(self): return self.pattern is not None

	def shape(self) -> str:
		""" A short readable rendition, for displays. """
		if self.is_terminal(): return '/%s/' % self.pattern.pattern
		return ' | '.join(' '.join(map(str, alt)) for alt in self.alternatives)

def terminal(name:str, regex:str, *, format_match=None, ignore=False, description='') -> PartDefinition:
	""" Declare a part matched directly against the text. Patterns are anchored at the current position. """
	return PartDefinition(name, description, (), re.compile(regex), format_match, ignore, None)

def composite(name:str, *alternatives:Iterable[str], handler:str=None, ignore=False, description='') -> PartDefinition:
	"""
	Declare a part composed of others. Each alternative is a sequence of constituent references:
		composite('pair', ['key', 'colon', 'value?'], ['key'])
	Alternatives are tried in the order given, and the first to match wins.
	"""
	alts = tuple(tuple(Constituent.parse(c) for c in alt) for alt in alternatives)
	return PartDefinition(name, description, alts, None, None, ignore, handler)


class FaultHandler(Protocol):
	"""
	The validation pass tells one of these about every problem it finds.
	This generic handler just raises exceptions, so validation stops at the first problem.
	A more sophisticated handler might collect the lot for a fuller report.
	"""
	def duplicate_definition(self, name):
		raise GrammarFault("Rule %r is defined more than once." % name)

	def missing_root(self, root):
		raise UnknownRule(root)

	def unknown_rule(self, referrer, name):
		raise UnknownRule(name, referrer)

	def malformed_definition(self, name, reason):
		raise GrammarFault("Rule %r is malformed: %s" % (name, reason))

	def unreachable_rules(self, names):
		raise GrammarFault("Unreachable rules: %s." % ', '.join(map(repr, sorted(names))))

	def missing_handler(self, name, method_name):
		raise GrammarFault("Rule %r needs a handler, but the builder has no method %r." % (name, method_name))

class SimpleFaultHandler(FaultHandler):
	""" Protocols cannot be instantiated, so here's a simple way to get "raise for everything" behavior. """
	pass


class Dialect:
	"""
	A table of part definitions with a designated root, and the metadata that goes with it.

	Once constructed, a dialect is never modified, so any number of simultaneous parses may share one.
	"""
	def __init__(self, *, title:str, root:str, definitions:Iterable[PartDefinition], description='', version=1.0, examples:dict=None):
		self.title = title
		self.description = description
		self.root = root
		self.version = version
		self.examples = dict(examples or {})
		self.definitions = {}
		self.duplicates = []
		for d in definitions:
			if d.name in self.definitions: self.duplicates.append(d.name)
			else: self.definitions[d.name] = d

	def __getitem__(self, name:str) -> PartDefinition:
		try: return self.definitions[name]
		except KeyError: raise UnknownRule(name) from None

	def __contains__(self, name): return name in self.definitions
	def __iter__(self): return iter(self.definitions.values())
	def __len__(self): return len(self.definitions)

	def validate(self, fault_handler:FaultHandler=SimpleFaultHandler()):
		"""
		Calls the fault handler with every identified fault. The default fault handler
		raises an exception (GrammarFault or UnknownRule) for the first problem noticed.
		"""
		for name in self.duplicates:
			fault_handler.duplicate_definition(name)
		if self.root not in self.definitions:
			fault_handler.missing_root(self.root)
		for d in self:
			self.__check_shape(d, fault_handler)
			for alt in d.alternatives:
				for c in alt:
					if c.name not in self.definitions:
						fault_handler.unknown_rule(d.name, c.name)
		def successors(name):
			if name in self.definitions:
				return [c.name for alt in self.definitions[name].alternatives for c in alt]
		unreachable = self.definitions.keys() - foundation.transitive_closure([self.root], successors)
		if unreachable:
			fault_handler.unreachable_rules(unreachable)

	@staticmethod
	def __check_shape(d:PartDefinition, fault_handler:FaultHandler):
		if d.is_terminal():
			if d.alternatives: fault_handler.malformed_definition(d.name, "has both a pattern and constituents.")
			if d.handler: fault_handler.malformed_definition(d.name, "a terminal cannot have a handler.")
		else:
			if not d.alternatives: fault_handler.malformed_definition(d.name, "has neither a pattern nor constituents.")
			if not all(d.alternatives): fault_handler.malformed_definition(d.name, "has an empty alternative.")
			if d.format_match: fault_handler.malformed_definition(d.name, "only a terminal can format its match.")

	def display(self):
		""" Print the rule table in an attractive grid on STDOUT. """
		head = ['Rule', 'Shape', 'Ignore', 'Handler']
		body = [[d.name, d.shape(), 'yes' if d.ignore else '', d.handler or ''] for d in self]
		print("%s (version %s), rooted at %r" % (self.title, self.version, self.root))
		pretty.print_grid([head] + body)
