import io
import unittest
from contextlib import redirect_stdout

from fastforms.parsing.grammar import Constituent, Dialect, composite, terminal
from fastforms.parsing.interface import GrammarFault, UnknownRule, LanguageError
from fastforms.forms.dialect import new_dialect


def small_dialect(*definitions, root='greeting'):
	base = [
		composite('greeting', ['word', 'space?', 'name*']),
		terminal('word', r'hello|hi'),
		terminal('space', r' ', ignore=True),
		terminal('name', r'[A-Z][a-z]*'),
	]
	return Dialect(title='Greetings', root=root, definitions=base + list(definitions))

class Collector:
	""" A fault handler which writes things down instead of raising. """
	def __init__(self): self.faults = []
	def duplicate_definition(self, name): self.faults.append(('duplicate', name))
	def missing_root(self, root): self.faults.append(('root', root))
	def unknown_rule(self, referrer, name): self.faults.append(('unknown', referrer, name))
	def malformed_definition(self, name, reason): self.faults.append(('malformed', name))
	def unreachable_rules(self, names): self.faults.append(('unreachable', sorted(names)))


class TestConstituent(unittest.TestCase):
	def test_quantifiers(self):
		for text, name, optional, repeated in [
			('form attribute*', 'form attribute', False, True),
			('value?', 'value', True, False),
			('newline', 'newline', False, False),
		]:
			with self.subTest(text=text):
				c = Constituent.parse(text)
				self.assertEqual(name, c.name)
				self.assertEqual(optional, c.is_optional())
				self.assertEqual(repeated, c.is_repeated())
				self.assertEqual(text, str(c))

class TestPartDefinition(unittest.TestCase):
	def test_terminal(self):
		d = terminal('hyphen', r'- ', ignore=True)
		self.assertTrue(d.is_terminal())
		self.assertTrue(d.ignore)
		self.assertEqual('/- /', d.shape())
	
	def test_composite(self):
		d = composite('pair', ['key', 'value?'], ['key'], handler='pair')
		self.assertFalse(d.is_terminal())
		self.assertEqual('pair', d.handler)
		self.assertEqual(2, len(d.alternatives))
		self.assertEqual('key value? | key', d.shape())

class TestValidation(unittest.TestCase):
	def test_sound_dialect(self):
		small_dialect().validate()
	
	def test_lookup(self):
		dialect = small_dialect()
		self.assertIn('word', dialect)
		self.assertEqual(4, len(dialect))
		self.assertEqual('word', dialect['word'].name)
		with self.assertRaises(UnknownRule):
			dialect['nope']
	
	def test_missing_root(self):
		with self.assertRaises(UnknownRule):
			small_dialect(root='salutation').validate()
	
	def test_unknown_constituent(self):
		dialect = small_dialect(composite('formal', ['word', 'title']), root='formal')
		with self.assertRaises(UnknownRule) as cm:
			dialect.validate()
		self.assertEqual('title', cm.exception.name)
		self.assertEqual('formal', cm.exception.referrer)
	
	def test_duplicate(self):
		with self.assertRaises(GrammarFault):
			small_dialect(terminal('word', r'hey')).validate()
	
	def test_malformed(self):
		for bogus in [
			terminal('space', r' ')._replace(name='extra', alternatives=((Constituent('word'),),)),
			terminal('extra', r'x')._replace(handler='extra'),
			composite('extra', []),
			composite('extra', ['word'])._replace(format_match=str),
		]:
			with self.subTest(bogus=bogus):
				with self.assertRaises(GrammarFault):
					small_dialect(bogus, composite('everything', ['greeting', 'extra']), root='everything').validate()
	
	def test_unreachable(self):
		with self.assertRaises(GrammarFault):
			small_dialect(terminal('orphan', r'x')).validate()
	
	def test_faults_are_language_errors(self):
		self.assertTrue(issubclass(UnknownRule, GrammarFault))
		self.assertTrue(issubclass(GrammarFault, LanguageError))
	
	def test_collecting_every_fault(self):
		collector = Collector()
		small_dialect(terminal('word', r'hey'), composite('formal', ['title']), root='salute').validate(collector)
		self.assertEqual([
			('duplicate', 'word'),
			('root', 'salute'),
			('unknown', 'formal', 'title'),
			('unreachable', ['formal', 'greeting', 'name', 'space', 'word']),
		], collector.faults)

class TestFastFormsDialect(unittest.TestCase):
	def setUp(self):
		self.dialect = new_dialect()
	
	def test_validates(self):
		self.dialect.validate()
	
	def test_metadata(self):
		self.assertEqual('Fast Forms', self.dialect.title)
		self.assertEqual('form', self.dialect.root)
		self.assertEqual(1.0, self.dialect.version)
		self.assertIn('HTML5', self.dialect.description)
		self.assertEqual(['Basic Contact Form', 'Option Fields'], list(self.dialect.examples))
	
	def test_shapes(self):
		self.assertEqual('form attribute* field*', self.dialect['form'].shape())
		self.assertEqual('hyphen name value? newline? | hyphen array newline?', self.dialect['field attribute'].shape())
		for name in ['hyphen', 'indent', 'newline', 'array open', 'array close']:
			with self.subTest(name=name):
				self.assertTrue(self.dialect[name].ignore)
		self.assertEqual({'form attribute': 'form_attribute', 'field': 'field'}, {d.name: d.handler for d in self.dialect if d.handler})
	
	def test_display(self):
		out = io.StringIO()
		with redirect_stdout(out): self.dialect.display()
		text = out.getvalue()
		self.assertTrue(text.startswith("Fast Forms (version 1.0), rooted at 'form'"))
		for d in self.dialect:
			self.assertIn(d.name, text)


if __name__ == '__main__':
	unittest.main()
