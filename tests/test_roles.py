"""Tests for pylogout.roles."""

import pytest

from pylogout.config import FALLBACK, Options
from pylogout.geometry import MonitorDescriptor, secondary_monitors
from pylogout.layout import ButtonSpec
from pylogout.roles import (
	BackgroundClick,
	buttons_focusable,
	should_replicate,
	watch_placement,
	window_role,
)


class TestWindowRole:
	"""Tests for window_role."""

	def test_primary(self):
		role = window_role(True, Options())

		assert role.primary
		assert role.populate
		assert role.exclusive_keyboard
		assert not role.pinned
		assert role.background_cancel

	def test_primary_with_explicit_monitor_is_pinned(self):
		assert window_role(True, Options(primary_monitor=1), monitor_index=1).pinned

	def test_secondary_without_mirror_is_empty(self):
		"""Secondary windows are a backdrop unless mirroring."""
		role = window_role(False, Options())

		assert not role.populate
		assert not role.exclusive_keyboard
		assert role.pinned

	def test_secondary_with_mirror_has_buttons(self):
		role = window_role(False, Options(mirror=True))

		assert role.populate
		assert not role.exclusive_keyboard

	@pytest.mark.parametrize("primary", [True, False])
	def test_no_pointer_disables_background_cancel(self, primary):
		assert not window_role(primary, Options(pointer=False)).background_cancel


class TestReplication:
	"""Tests for placement and replication decisions."""

	def test_placement_is_watched_for_overlay_primary_only(self):
		"""Margins follow the monitor the compositor picked, even without span."""
		assert watch_placement(True, True)
		assert not watch_placement(True, False)
		assert not watch_placement(False, True)

	@pytest.mark.parametrize("overlay,options,expected", [
		(True, Options(), True),
		(True, Options(span=False), False),
		(False, Options(protocol=FALLBACK), False),
		(False, Options(), False),
	])
	def test_should_replicate(self, overlay, options, expected):
		assert should_replicate(overlay, options) == expected

	def test_primary_monitor_not_replicated(self):
		monitors = [
			MonitorDescriptor(1920, 1080, "DP-1"),
			MonitorDescriptor(2560, 1440, "HDMI-A-1"),
		]

		others = secondary_monitors(monitors, "HDMI-A-1")

		assert [m.stable_id for m in others] == ["DP-1"]


class TestFocus:
	"""Tests for buttons_focusable."""

	def test_keybinds_remove_focus(self):
		"""With keybinds a focused button would grab Return on key press."""
		buttons = [ButtonSpec("lock", "Lock", "true"), ButtonSpec("reboot", "Reboot", "true", "Return")]

		assert not buttons_focusable(buttons)

	def test_focusable_without_keybinds(self):
		assert buttons_focusable([ButtonSpec("lock", "Lock", "true")])
		assert buttons_focusable([])


class TestBackgroundClick:
	"""Tests for BackgroundClick."""

	def test_press_then_release(self):
		click = BackgroundClick()

		assert click.press()
		assert click.release()
		assert not click.release()

	def test_release_without_press(self):
		assert not BackgroundClick().release()

	def test_disabled(self):
		click = BackgroundClick(enabled=False)

		assert not click.press()
		assert not click.release()
