# Layout file parsing: ordered button records -> ButtonSpec tuples

import json
from dataclasses import dataclass

DEFAULT_X_ALIGN = 0.5
DEFAULT_Y_ALIGN = 0.9

STRING_FIELDS = ("label", "text", "keybind", "action")


class ConfigError(Exception):
	pass


class MalformedLayout(ConfigError):
	pass


class MissingField(ConfigError):
	def __init__(self, field, index):
		super().__init__(f"button {index}: missing required field '{field}'")
		self.field = field
		self.index = index


@dataclass(frozen=True)
class ButtonSpec:
	identifier: str
	display_text: str
	action: str
	keybind: str = None
	x_align: float = DEFAULT_X_ALIGN
	y_align: float = DEFAULT_Y_ALIGN
	width: int = None
	height: int = None

	@property
	def inert(self):
		return not self.action

	@property
	def has_size(self):
		return self.width is not None and self.height is not None


# ── Decoding ────────────────────────────────────────────────────────────────

def _decode_records(text):
	"""Return the list of raw records.

	Accepts a JSON array, or the wlogout layout format where objects simply
	follow each other.
	"""
	stripped = text.strip()
	if not stripped:
		return []
	try:
		if stripped.startswith("["):
			records = json.loads(stripped)
		else:
			decoder = json.JSONDecoder()
			records = []
			pos = 0
			while pos < len(stripped):
				obj, pos = decoder.raw_decode(stripped, pos)
				records.append(obj)
				while pos < len(stripped) and stripped[pos] in " \t\r\n,":
					pos += 1
	except json.JSONDecodeError as e:
		raise MalformedLayout(f"invalid layout: {e}") from e
	if not isinstance(records, list):
		raise MalformedLayout("layout must be a list of button records")
	return records


def _alignment(record, key, default, index):
	value = record.get(key, default)
	if isinstance(value, bool) or not isinstance(value, (int, float)):
		raise MalformedLayout(f"button {index}: '{key}' must be a number")
	if not 0.0 <= value <= 1.0:
		raise MalformedLayout(f"button {index}: '{key}' must be within [0, 1]")
	return float(value)


def _size(record, key, index):
	value = record.get(key)
	if value is None:
		return None
	if isinstance(value, float) and value.is_integer():
		value = int(value)
	if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
		raise MalformedLayout(f"button {index}: '{key}' must be a positive integer")
	return value


def _button(record, index):
	if not isinstance(record, dict):
		raise MalformedLayout(f"button {index}: expected an object")
	if "action" not in record:
		raise MissingField("action", index)
	for key in STRING_FIELDS:
		if key in record and not isinstance(record[key], str):
			raise MalformedLayout(f"button {index}: '{key}' must be a string")
	return ButtonSpec(
		identifier=record.get("label", ""),
		display_text=record.get("text", ""),
		action=record["action"],
		keybind=record.get("keybind") or None,
		x_align=_alignment(record, "label_x_align", DEFAULT_X_ALIGN, index),
		y_align=_alignment(record, "label_y_align", DEFAULT_Y_ALIGN, index),
		width=_size(record, "width", index),
		height=_size(record, "height", index),
	)


def parse(raw):
	"""Parse layout bytes (or text) into an ordered tuple of ButtonSpec."""
	if isinstance(raw, bytes):
		try:
			raw = raw.decode("utf-8-sig")
		except UnicodeDecodeError as e:
			raise MalformedLayout(f"layout is not valid UTF-8: {e}") from e
	elif raw.startswith("\ufeff"):
		raw = raw[1:]
	return tuple(_button(record, i) for i, record in enumerate(_decode_records(raw)))


def duplicate_keybinds(buttons):
	"""Map each keybind claimed by several buttons to their identifiers."""
	seen = {}
	for button in buttons:
		if button.keybind:
			seen.setdefault(button.keybind, []).append(button.identifier)
	return {key: ids for key, ids in seen.items() if len(ids) > 1}


def label_text(button, show_binds=False):
	if show_binds and button.keybind:
		return f"{button.display_text} [{button.keybind}]"
	return button.display_text
