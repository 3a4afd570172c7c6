"""
Turn a completed form model into HTML markup.

This is a pure function of the model: the model is never modified, and rendering
the same model twice produces the same text. Fields without a name get one
(`field1`, `field2`, ... by position) and fields without an id borrow the name,
but those defaults live only in the output.

Each input type may have its own rendering strategy. Any type without one is
treated as a plain self-closing <input> element, which covers text, email,
submit, and the rest of the HTML5 zoo.
"""

import html
from typing import Callable

from ..parsing.interface import RenderTypeMismatch
from .model import Model, Field, capitalize

INDENT = '  '

class Control:
	""" A field as it will be rendered, with the naming defaults applied. """
	def __init__(self, field:Field, index:int):
		self.field = field
		self.attributes = dict(field.attributes)
		self.name = field.name or 'field%d' % index
		if not field.name: self.attributes['name'] = self.name
		self.id = field.id or self.name
		if not field.id: self.attributes['id'] = self.id

	def label(self):
		""" Explicit labels always show. Implicit labels come from the name, except on submit buttons. """
		if self.field.label: return self.field.label
		if self.field.input_type != 'submit': return capitalize(self.name)

def escape(text:str) -> str: return html.escape(text, quote=True)

def render_attributes(attributes) -> str:
	return ''.join(' %s="%s"' % (name, escape(value)) for name, value in attributes)

def render_label(control:Control, out:list):
	text = control.label()
	if text is not None:
		out.append(INDENT*2 + '<label for="%s">%s</label>\n' % (escape(control.id), escape(text)))

def render_input(control:Control, out:list):
	render_label(control, out)
	out.append(INDENT*2 + '<input type="%s"%s />\n' % (escape(control.field.input_type), render_attributes(control.attributes.items())))

def render_textarea(control:Control, out:list):
	render_label(control, out)
	out.append(INDENT*2 + '<textarea%s></textarea>\n' % render_attributes(control.attributes.items()))

def render_select(control:Control, out:list):
	render_label(control, out)
	out.append(INDENT*2 + '<select%s>\n' % render_attributes(control.attributes.items()))
	for value, label in control.field.options.items():
		out.append(INDENT*3 + '<option value="%s">%s</option>\n' % (escape(value), escape(label)))
	out.append(INDENT*2 + '</select>\n')

def render_choices(control:Control, out:list):
	""" One labelled input per option. Only the first gets the id, since ids must be unique in a document. """
	kind = escape(control.field.input_type)
	for i, (value, label) in enumerate(control.field.options.items()):
		attributes = [(k, v) for k, v in control.attributes.items() if i == 0 or k != 'id']
		out.append(INDENT*2 + '<label><input type="%s"%s value="%s"/>%s</label>\n' % (kind, render_attributes(attributes), escape(value), escape(label)))

STRATEGY:dict[str, Callable[[Control, list], None]] = {
	'textarea': render_textarea,
	'select': render_select,
	'radio': render_choices,
	'checkbox': render_choices,
}

def generate_output(model:Model) -> str:
	if not isinstance(model, Model):
		raise RenderTypeMismatch("Expected a form model to render, but got %s." % type(model).__name__)
	out = ['<form', render_attributes(model.attributes), '>\n']
	for index, field in enumerate(model.fields, 1):
		control = Control(field, index)
		out.append(INDENT + '<div class="form-group">\n')
		STRATEGY.get(field.input_type, render_input)(control, out)
		out.append(INDENT + '</div>\n')
	out.append('</form>\n')
	return ''.join(out)
