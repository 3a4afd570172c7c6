"""
The semantic model of a form: what the handlers build and the renderer consumes.

Attribute and option mappings are ordinary dictionaries, which remember insertion order.
The renderer relies on that: markup comes out with attributes in the order they were declared.
"""

from typing import NamedTuple, Optional

class Attribute(NamedTuple):
	name: str
	value: str

def capitalize(text:str) -> str:
	""" Upper-case the first character only, leaving the rest alone. Unlike str.capitalize, which lowers the rest. """
	if not text: raise ValueError("Cannot capitalize an empty name.")
	return text[0].upper() + text[1:]

class Field:
	""" One form control: its input type plus whatever attributes and options were declared for it. """
	def __init__(self, input_type:str, *, label:Optional[str]=None, id:Optional[str]=None, name:Optional[str]=None):
		self.input_type = input_type
		self.label = label
		self.id = id
		self.name = name
		self.attributes:dict[str, str] = {}
		self.options:dict[str, str] = {}

	def __repr__(self):
		return "<Field %s %r>" % (self.input_type, self.name)

class Model:
	""" Form-level attributes, then fields, each in the order declared. """
	def __init__(self):
		self.attributes:list[Attribute] = []
		self.fields:list[Field] = []
