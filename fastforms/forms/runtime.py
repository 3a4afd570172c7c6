"""
The convenient way in: hand over Fast Forms text, get back HTML.

A FastForms object validates its dialect and binds the semantic actions once, when
constructed. After that it holds nothing but read-only tables, so one instance may
serve any number of parses, simultaneous or otherwise: each parse gets its own model.
"""

from ..parsing import descent
from .builder import ModelBuilder
from .dialect import new_dialect, new_model
from .model import Model
from .render import generate_output

class FastForms:
	def __init__(self):
		self.dialect = new_dialect()
		self.dialect.validate()
		self.__handlers = descent.bind_handlers(self.dialect, ModelBuilder())

	def build_model(self, text:str, *, filename:str=None) -> Model:
		""" Parse text into a fresh model. Raises ParseFailure, TrailingInput, or SemanticRejection. """
		model = new_model()
		descent.parse(self.dialect, self.__handlers, text, model, filename=filename)
		return model

	def parse(self, text:str, *, filename:str=None) -> str:
		return generate_output(self.build_model(text, filename=filename))

STANDARD = FastForms()

def parse(text:str, *, filename:str=None) -> str:
	return STANDARD.parse(text, filename=filename)
