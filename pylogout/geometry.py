# Per-monitor margin computation and monitor selection helpers

from collections import namedtuple
from dataclasses import dataclass


class GeometryError(Exception):
	pass


MonitorDescriptor = namedtuple("MonitorDescriptor", "width height stable_id")

MarginBox = namedtuple("MarginBox", "top bottom left right")


@dataclass(frozen=True)
class FixedMargins:
	top: int = 230
	bottom: int = 230
	left: int = 230
	right: int = 230


@dataclass(frozen=True)
class AutoMargins:
	button_width: int
	button_height: int
	inner_margin: int = 0
	row_spacing: int = 0
	column_spacing: int = 0


def auto_margins(buttons, inner_margin=0, row_spacing=0, column_spacing=0,
		button_width=None, button_height=None):
	"""Build the auto-centering policy, failing when button size is unknown.

	Explicit sizes win; otherwise every button must declare both width and
	height and the largest of each is used.
	"""
	if button_width is None or button_height is None:
		if not buttons or not all(b.has_size for b in buttons):
			raise GeometryError(
				"auto margins need a button width and height: pass "
				"--button-width/--button-height or set width/height on every button")
		if button_width is None:
			button_width = max(b.width for b in buttons)
		if button_height is None:
			button_height = max(b.height for b in buttons)
	return AutoMargins(button_width, button_height, inner_margin, row_spacing, column_spacing)


def content_extent(count, size, inner_margin, spacing):
	if count <= 0:
		return 0
	return count * size + count * 2 * inner_margin + (count - 1) * spacing


def resolve(monitor, rows, columns, policy):
	"""Return the MarginBox for one monitor.

	Negative margins (content larger than the monitor) are passed through.
	"""
	if isinstance(policy, FixedMargins):
		return MarginBox(policy.top, policy.bottom, policy.left, policy.right)
	height = content_extent(rows, policy.button_height, policy.inner_margin, policy.row_spacing)
	width = content_extent(columns, policy.button_width, policy.inner_margin, policy.column_spacing)
	vertical = (monitor.height - height) // 2
	horizontal = (monitor.width - width) // 2
	return MarginBox(vertical, vertical, horizontal, horizontal)


# ── Monitors ────────────────────────────────────────────────────────────────

def clamp_monitor_index(index, count):
	return max(0, min(index, count - 1))


def secondary_monitors(monitors, primary_id):
	return [m for m in monitors if m.stable_id != primary_id]
