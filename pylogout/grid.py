# Row-major placement of buttons onto a fixed-column grid

import math


def row_count(count, columns):
	return math.ceil(count / columns)


def place(buttons, columns):
	"""Return (button, row, column) triples in layout order.

	The last row may be short; no cells are reserved for missing buttons.
	"""
	if columns < 1:
		raise ValueError("columns per row must be at least 1")
	return [(button, i // columns, i % columns) for i, button in enumerate(buttons)]
