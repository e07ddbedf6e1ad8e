# Overlay windows: one per monitor, button grid, input routing

import sys

import gi
gi.require_version("Gdk", "3.0")
gi.require_version("Gtk", "3.0")
from gi.repository import Gdk, Gtk
import cairo

try:
	gi.require_version("GtkLayerShell", "0.1")
	from gi.repository import GtkLayerShell
except (ValueError, ImportError):
	GtkLayerShell = None

from .geometry import MonitorDescriptor, clamp_monitor_index, resolve, secondary_monitors
from .grid import place, row_count
from .layout import label_text
from .roles import BackgroundClick, buttons_focusable, should_replicate, watch_placement, window_role

LAYER_EDGES = ("TOP", "BOTTOM", "LEFT", "RIGHT")


def layer_shell_available():
	return GtkLayerShell is not None and GtkLayerShell.is_supported()


def describe_monitor(monitor):
	"""Snapshot a Gdk.Monitor; the id survives re-enumeration of the display."""
	geo = monitor.get_geometry()
	stable_id = "%s:%s:%d,%d:%dx%d" % (
		monitor.get_manufacturer() or "", monitor.get_model() or "",
		geo.x, geo.y, geo.width, geo.height)
	return MonitorDescriptor(geo.width, geo.height, stable_id)


def list_monitors(display):
	return [display.get_monitor(i) for i in range(display.get_n_monitors())]


# ── Window ──────────────────────────────────────────────────────────────────

class LauncherWindow(Gtk.Window):
	def __init__(self, monitor, role):
		super().__init__(title="pylogout")
		self.monitor = monitor
		self.role = role
		self.buttons = []
		self.background = BackgroundClick(role.background_cancel)

		self.set_decorated(False)
		visual = self.get_screen().get_rgba_visual()
		if visual:
			self.set_visual(visual)
		self.connect("draw", self.on_draw)

		self.root = Gtk.Box(orientation=Gtk.Orientation.HORIZONTAL)
		self.add(self.root)
		self.grid = Gtk.Grid()
		self.root.pack_start(self.grid, True, True, 0)

	def on_draw(self, widget, cr):
		cr.set_source_rgba(0, 0, 0, 0)
		cr.set_operator(cairo.Operator.SOURCE)
		cr.paint()
		cr.set_operator(cairo.Operator.OVER)
		return False

	def apply_margins(self, box):
		# widget margins cannot go below zero; the grid then overflows
		self.grid.set_margin_top(max(0, box.top))
		self.grid.set_margin_bottom(max(0, box.bottom))
		self.grid.set_margin_start(max(0, box.left))
		self.grid.set_margin_end(max(0, box.right))


# ── Compositor ──────────────────────────────────────────────────────────────

class Compositor:
	def __init__(self, buttons, options, display=None):
		self.buttons = buttons
		self.options = options
		self.display = display or Gdk.Display.get_default()
		self.controller = None
		self.bindings = []
		self.windows = []
		self.overlay = False
		self._placed = False

	def present(self, controller):
		"""Phase 1: show the primary window.

		Margins for the monitor actually used, and replication onto the
		remaining monitors, wait for the primary to be mapped, see
		on_primary_placed.
		"""
		self.controller = controller
		self.bindings = controller.bind_all(self.buttons)
		self.overlay = self.options.overlay and layer_shell_available()
		if self.options.overlay and not self.overlay:
			print("pylogout: layer-shell not available, falling back to fullscreen",
				file=sys.stderr)

		monitors = list_monitors(self.display)
		if self.options.primary_monitor is not None and monitors:
			index = clamp_monitor_index(self.options.primary_monitor, len(monitors))
			monitor = monitors[index]
		else:
			index = None
			monitor = self.display.get_primary_monitor() or (monitors[0] if monitors else None)

		return self.present_window(monitor, True, index)

	def on_primary_placed(self, window, _event):
		"""Phase 2: the compositor has put the primary on a monitor."""
		if self._placed:
			return False
		self._placed = True
		placed = self.display.get_monitor_at_window(window.get_window())
		if placed is None:
			return False
		window.monitor = placed
		window.apply_margins(self._margins(placed))
		if should_replicate(self.overlay, self.options):
			self._replicate(placed)
		return False

	def _replicate(self, placed):
		monitors = {}
		for monitor in list_monitors(self.display):
			monitors[describe_monitor(monitor).stable_id] = monitor
		descriptors = [describe_monitor(m) for m in monitors.values()]
		for descriptor in secondary_monitors(descriptors, describe_monitor(placed).stable_id):
			self.present_window(monitors[descriptor.stable_id], False)

	def present_window(self, monitor, primary, monitor_index=None):
		role = window_role(primary, self.options, monitor_index)
		window = LauncherWindow(monitor, role)
		if self.overlay:
			self._anchor(window, monitor, role)
		else:
			self._fullscreen(window, monitor_index)

		window.grid.set_row_spacing(self.options.row_spacing)
		window.grid.set_column_spacing(self.options.column_spacing)
		if role.populate:
			self._populate(window)
		if monitor is not None:
			window.apply_margins(self._margins(monitor))

		window.add_events(
			Gdk.EventMask.BUTTON_PRESS_MASK |
			Gdk.EventMask.BUTTON_RELEASE_MASK |
			Gdk.EventMask.KEY_RELEASE_MASK)
		window.connect("key-release-event", self.on_key_release)
		window.connect("delete-event", self.on_delete)
		if role.background_cancel:
			window.connect("button-press-event", self.on_background_press)
			window.connect("button-release-event", self.on_background_release)
		if watch_placement(self.overlay, primary):
			window.connect("map-event", self.on_primary_placed)

		self.windows.append(window)
		window.show_all()
		window.set_focus(None)
		return window

	def _anchor(self, window, monitor, role):
		GtkLayerShell.init_for_window(window)
		GtkLayerShell.set_namespace(window, "pylogout")
		GtkLayerShell.set_layer(window, GtkLayerShell.Layer.OVERLAY)
		for edge in LAYER_EDGES:
			GtkLayerShell.set_anchor(window, getattr(GtkLayerShell.Edge, edge), True)
		GtkLayerShell.set_exclusive_zone(window, -1)
		if role.exclusive_keyboard:
			GtkLayerShell.set_keyboard_mode(window, GtkLayerShell.KeyboardMode.EXCLUSIVE)
		else:
			GtkLayerShell.set_keyboard_mode(window, GtkLayerShell.KeyboardMode.ON_DEMAND)
		if role.pinned and monitor is not None:
			GtkLayerShell.set_monitor(window, monitor)

	def _fullscreen(self, window, monitor_index):
		window.set_keep_above(True)
		window.set_skip_taskbar_hint(True)
		window.set_skip_pager_hint(True)
		if monitor_index is not None:
			window.fullscreen_on_monitor(window.get_screen(), monitor_index)
		else:
			window.fullscreen()

	def _margins(self, monitor):
		columns = self.options.columns
		rows = row_count(len(self.buttons), columns)
		return resolve(describe_monitor(monitor), rows, columns, self.options.margins)

	def _populate(self, window):
		margin = self.options.inner_margin
		focusable = buttons_focusable(self.buttons)
		for (button, row, column), binding in zip(place(self.buttons, self.options.columns), self.bindings):
			widget = Gtk.Button(label=label_text(button, self.options.show_binds))
			if button.identifier:
				widget.set_name(button.identifier)
			label = widget.get_child()
			if isinstance(label, Gtk.Label):
				label.set_xalign(button.x_align)
				label.set_yalign(button.y_align)
			widget.set_margin_top(margin)
			widget.set_margin_bottom(margin)
			widget.set_margin_start(margin)
			widget.set_margin_end(margin)
			widget.set_size_request(button.width or -1, button.height or -1)
			widget.set_hexpand(button.width is None)
			widget.set_vexpand(button.height is None)
			widget.set_can_focus(focusable)
			widget.connect("clicked", self.on_clicked, binding)
			window.grid.attach(widget, column, row, 1, 1)
			window.buttons.append(widget)

	# ── Input ───────────────────────────────────────────────────────────────

	def on_clicked(self, _widget, binding):
		self.controller.fire(binding)

	def on_key_release(self, _window, event):
		name = Gdk.keyval_name(event.keyval)
		if name is None:
			return False
		return self.controller.on_key_release(name)

	def on_background_press(self, window, _event):
		return window.background.press()

	def on_background_release(self, window, _event):
		if not window.background.release():
			return False
		self.controller.cancel()
		return True

	def on_delete(self, _window, _event):
		self.controller.cancel()
		return True

	def close_all(self):
		windows, self.windows = self.windows, []
		for window in windows:
			window.destroy()
		Gtk.main_quit()
