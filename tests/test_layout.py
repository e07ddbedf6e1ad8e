"""Tests for pylogout.layout."""

import json

import pytest

from pylogout.layout import (
	DEFAULT_X_ALIGN,
	DEFAULT_Y_ALIGN,
	ButtonSpec,
	ConfigError,
	MalformedLayout,
	MissingField,
	duplicate_keybinds,
	label_text,
	parse,
)


def make_record(label, action=None, **extra):
	record = {"label": label, "action": action or f"echo {label}", "text": label.title()}
	record.update(extra)
	return record


class TestParse:
	"""Tests for parse."""

	def test_json_array(self):
		"""An array keeps its order and fills every field."""
		raw = json.dumps([
			make_record("lock", keybind="l"),
			make_record("reboot", keybind="r", width=200, height=100),
		]).encode()

		buttons = parse(raw)

		assert [b.identifier for b in buttons] == ["lock", "reboot"]
		assert buttons[0] == ButtonSpec("lock", "Lock", "echo lock", "l")
		assert buttons[1].width == 200
		assert buttons[1].height == 100

	def test_wlogout_object_stream(self):
		"""Consecutive objects parse like an array."""
		raw = "\n".join(json.dumps(make_record(n)) for n in ("lock", "logout", "shutdown"))

		buttons = parse(raw.encode())

		assert [b.identifier for b in buttons] == ["lock", "logout", "shutdown"]

	def test_defaults(self):
		"""Alignment defaults to bottom-centered and there is no implicit size."""
		(button,) = parse(b'[{"action": "true"}]')

		assert button.x_align == DEFAULT_X_ALIGN == 0.5
		assert button.y_align == DEFAULT_Y_ALIGN == 0.9
		assert button.width is None
		assert button.height is None
		assert button.keybind is None
		assert button.identifier == ""
		assert not button.has_size

	def test_alignment(self):
		(button,) = parse(json.dumps([make_record("lock", label_x_align=0, label_y_align=0.25)]))

		assert button.x_align == 0.0
		assert button.y_align == 0.25

	def test_empty_input(self):
		assert parse(b"") == ()
		assert parse(b"[]") == ()

	def test_empty_action_is_inert(self):
		(button,) = parse(b'[{"label": "spacer", "action": ""}]')

		assert button.inert

	def test_missing_action(self):
		"""A record without action is reported with its index."""
		raw = json.dumps([make_record("lock"), {"label": "reboot", "text": "Reboot"}])

		with pytest.raises(MissingField) as info:
			parse(raw)

		assert info.value.field == "action"
		assert info.value.index == 1
		assert isinstance(info.value, ConfigError)

	@pytest.mark.parametrize("raw", [
		b"{not json",
		b'"just a string"',
		b'[1, 2]',
		b'[{"action": 3}]',
		b'[{"action": "true", "label_x_align": 1.5}]',
		b'[{"action": "true", "label_y_align": "bottom"}]',
		b'[{"action": "true", "width": 0}]',
		b'[{"action": "true", "height": 10.5}]',
		b"\xff\xfe",
	])
	def test_malformed(self, raw):
		with pytest.raises(MalformedLayout):
			parse(raw)

	def test_byte_order_mark(self):
		"""Editors that save with a UTF-8 BOM still produce a valid layout."""
		(button,) = parse(b'\xef\xbb\xbf[{"action": "true"}]')

		assert button.action == "true"
		assert len(parse("\ufeff" '{"action": "true"}')) == 1

	def test_integral_float_size(self):
		(button,) = parse(b'[{"action": "true", "width": 200.0, "height": 100}]')

		assert button.width == 200
		assert isinstance(button.width, int)
		assert button.height == 100

	def test_single_object(self):
		"""A lone object is a one-button stream, not an error."""
		assert len(parse(b'{"action": "true"}')) == 1


class TestKeybinds:
	"""Tests for keybind helpers."""

	def test_duplicates(self):
		buttons = parse(json.dumps([
			make_record("lock", keybind="Return"),
			make_record("logout", keybind="e"),
			make_record("reboot", keybind="Return"),
		]))

		assert duplicate_keybinds(buttons) == {"Return": ["lock", "reboot"]}

	def test_no_duplicates(self):
		buttons = parse(json.dumps([make_record("lock", keybind="l"), make_record("reboot")]))

		assert duplicate_keybinds(buttons) == {}

	def test_label_text(self):
		(button,) = parse(json.dumps([make_record("lock", keybind="l")]))

		assert label_text(button) == "Lock"
		assert label_text(button, show_binds=True) == "Lock [l]"

	def test_label_text_without_keybind(self):
		(button,) = parse(json.dumps([make_record("lock")]))

		assert label_text(button, show_binds=True) == "Lock"
