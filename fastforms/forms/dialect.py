"""
The Fast Forms dialect: terse, line-oriented notation for HTML5 forms.

A definition is a series of blank-line-separated blocks. An optional leading
block of `- attribute value` lines applies to the form element itself. Every
other block starts with a bare line naming an input type, followed by lines
of `- attribute value` for that field. A bare `- attribute` means the value is
the same as the name, which is just right for flags like `required`.

Fields with choices take an array block of indented options, each with a value
and an optional label. The label defaults to the capitalized value.
"""

from ..parsing.grammar import Dialect, composite, terminal
from .model import Model

CONTACT_FORM = """- method post

text
- name name
- maxlength 30
- required

email
- name email

textarea
- name message

submit
- value Send message"""

OPTION_FIELDS = """radio
- name preference
- [
  call Call me back
  email Email me a message
  mail Send me a letter
]

checkbox
- name permission
- [
  yes I give my permission to contact me
]

select
- name department
- [
  sales
  tech Tech Support
  receivables
]"""

def new_dialect() -> Dialect:
	return Dialect(
		title="Fast Forms",
		description="The Fast Forms DSL speeds the creation of HTML5 forms, often cutting the number of characters required in half.",
		root="form",
		version=1.0,
		examples={
			"Basic Contact Form": CONTACT_FORM,
			"Option Fields": OPTION_FIELDS,
		},
		definitions=[
			composite('form', ['form attribute*', 'field*'], description="Composed of zero-or-more attributes and zero-or-more fields."),
			composite('form attribute', ['hyphen', 'name', 'value?', 'newline'], handler='form_attribute', description="Defines an attribute of the form tag."),
			composite('field', ['newline?', 'field type', 'field attribute*'], handler='field', description="Composed of optional new-line, field type, and zero-or-more field attributes."),
			composite('field type', ['field name', 'newline']),
			terminal('field name', r'[a-zA-Z][a-zA-Z0-9_-]+'),
			composite('field attribute', ['hyphen', 'name', 'value?', 'newline?'], ['hyphen', 'array', 'newline?']),
			composite('array', ['array open', 'newline', 'option*', 'array close']),
			terminal('array open', r'\[', ignore=True),
			composite('option', ['indent', 'name', 'value?', 'newline']),
			terminal('array close', r'\]', ignore=True),
			terminal('name', r'([a-zA-Z0-9_.-]+)( )?', format_match=lambda m: m.group(1), description="Grabs up to and including the first space."),
			terminal('value', r'[^\n]+', description="Grabs up to the end of the line."),
			terminal('hyphen', r'- ', ignore=True),
			terminal('indent', r'  ', ignore=True),
			terminal('newline', r'\n', ignore=True),
		],
	)

def new_model() -> Model: return Model()
