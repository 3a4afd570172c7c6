"""
Semantic actions for the Fast Forms dialect.

Two rules do all the construction: each form attribute appends to the model's
attribute list, and each field appends a completed Field. The builder itself
holds no state, so one instance serves any number of parses; the model under
construction arrives as a parameter.
"""

import warnings

from ..parsing.descent import Part
from ..parsing.interface import SemanticRejection
from .model import Model, Field, Attribute, capitalize

def name_and_value(part:Part):
	""" For any part shaped like `name value?`, the value defaults to the name. """
	name = part.constituents[0].value
	value = part.constituents[1].value if len(part.constituents) > 1 else name
	return name, value

class ModelBuilder:

	def parse_form_attribute(self, part:Part, model:Model):
		model.attributes.append(Attribute(*name_and_value(part)))

	def parse_field(self, part:Part, model:Model):
		field_type, *field_attributes = part.constituents
		field = Field(field_type.constituents[0].value)
		for attribute in field_attributes:
			inner = attribute.constituents[0]
			if inner.name == 'name': self.__set_attribute(field, *name_and_value(attribute))
			else:
				for option in inner.constituents: self.__add_option(field, option)
		model.fields.append(field)

	@staticmethod
	def __set_attribute(field:Field, name:str, value:str):
		if name == 'label':
			field.label = value
			return
		if name == 'id': field.id = value
		if name == 'name': field.name = value
		if name in field.attributes:
			warnings.warn("Attribute %r is declared more than once on a %s field; the last one wins." % (name, field.input_type))
		field.attributes[name] = value

	@staticmethod
	def __add_option(field:Field, option:Part):
		value = option.constituents[0].value
		if len(option.constituents) > 1: label = option.constituents[1].value
		else:
			try: label = capitalize(value)
			except ValueError as ex: raise SemanticRejection('option', str(ex), option.start) from None
		if value in field.options:
			warnings.warn("Option %r is declared more than once on a %s field; the last one wins." % (value, field.input_type))
		field.options[value] = label
