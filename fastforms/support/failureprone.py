"""
Everything needed to say where in a form definition something went wrong.

The matcher works in terms of plain integer offsets into the source text. That is
as much location data as the parsing machinery cares about, but a person reading an
error message wants a line number, a column, and a look at the offending line with
the interesting bit pointed out. The SourceText provides the first two, and the
`illustration` function draws the picture.

Form definitions are line-oriented, so line breaks matter here more than usual.
The matcher itself only ever treats \n as a line break, but people edit these files
on all sorts of systems, so for reporting purposes SourceText accepts the usual
suspects. You can supply a mode argument to pick a different convention; the options
are the keys of the LINEBREAK_MODE dictionary.
"""

import bisect, re

LINEBREAK_MODE = {
	'normal': re.compile(r'\r\n?|\n'),
	'unix': re.compile(r'\n'),
	'dos': re.compile(r'\r\n'),
}

def illustration(single_line:str, start:int, width:int=0, *, prefix='', caption="near here") -> str:
	""" Builds up a picture of where something appears in a line of text. """
	blanks = ''.join(c if c == '\t' else ' ' for c in prefix + single_line[:start])
	underline = '^' * max(1, min(width, len(single_line.rstrip()) - start))
	return prefix + single_line.rstrip() + '\n' + blanks + underline + " " + caption

class SourceText:
	""" Wrapper for source text: knows how to turn offsets into rows, columns, and polite complaints. """
	def __init__(self, content:str, line_breaks='normal', filename:str=None, first_line=1):
		self.content = content
		self.filename = filename
		self.line_breaks = line_breaks
		self.first_line = first_line
		self.__bounds = None

	def __make_bounds(self):
		""" Lazily find line breaks, only for texts which turn out to need them. """
		if self.__bounds is None:
			inside = [m.end() for m in LINEBREAK_MODE[self.line_breaks].finditer(self.content)]
			self.__bounds = [0] + inside + [len(self.content)]
		return self.__bounds

	def find_row_col(self, index:int):
		""" Based on a character offset from the start of text. Respects self.first_line. """
		bounds = self.__make_bounds()
		row = bisect.bisect_right(bounds, index, hi=len(bounds) - 1) - 1
		return row + self.first_line, index - bounds[row]

	def line_of_text(self, row:int) -> str:
		""" Argument respects self.first_line. """
		bounds = self.__make_bounds()
		r = min(max(0, row - self.first_line), len(bounds) - 2)
		return self.content[bounds[r]:bounds[r + 1]]

	def _format_message(self, row, col, message):
		prefix = "At" if self.filename is None else str(self.filename) + ":"
		return "%s line %d, column %d: %s" % (prefix, row, col + 1, message)

	def complaint(self, a_slice:slice, message:str) -> str:
		left, right = a_slice.start, a_slice.stop
		row, col = self.find_row_col(left)
		reference = self._format_message(row, col, message)
		illustrated = illustration(self.line_of_text(row), col, right - left, prefix=' >>> ')
		return "%s\n%s" % (reference, illustrated)
