# Per-window presentation decisions, kept free of GTK so they can be tested

from collections import namedtuple

WindowRole = namedtuple("WindowRole", "primary populate exclusive_keyboard pinned background_cancel")


def window_role(primary, options, monitor_index=None):
	"""Decide how one window behaves.

	The primary is only pinned to a monitor when an index was given;
	secondaries are always pinned to the monitor they were created for.
	"""
	return WindowRole(
		primary=primary,
		populate=primary or options.mirror,
		exclusive_keyboard=primary,
		pinned=monitor_index is not None or not primary,
		background_cancel=options.pointer,
	)


def watch_placement(overlay, primary):
	# only layer-shell windows are moved by the compositor after mapping
	return overlay and primary


def should_replicate(overlay, options):
	return overlay and options.span


def buttons_focusable(buttons):
	"""Buttons keep keyboard focus only when no keybinds are configured.

	A focused button reacts to Return/space on key press, ahead of any
	keybind matched on release.
	"""
	return not any(button.keybind for button in buttons)


class BackgroundClick:
	"""Press then release on the window background, outside any button."""

	def __init__(self, enabled=True):
		self.enabled = enabled
		self.pressed = False

	def press(self):
		if not self.enabled:
			return False
		self.pressed = True
		return True

	def release(self):
		"""Return True when the release completes a background click."""
		if not self.enabled or not self.pressed:
			return False
		self.pressed = False
		return True
