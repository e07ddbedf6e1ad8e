# Entry point: load layout and style, present the windows, run the main loop

import sys

import gi
gi.require_version("Gdk", "3.0")
gi.require_version("Gtk", "3.0")
from gi.repository import Gdk, GLib, Gtk

from .compositor import Compositor
from .config import CSS_FILE, LAYOUT_FILE, build_options, build_parser, find_config_file
from .dispatch import SessionController
from .geometry import GeometryError
from .layout import ConfigError, duplicate_keybinds, parse


def load_layout(path):
	if path is None:
		raise ConfigError("failed to find a layout file")
	try:
		with open(path, "rb") as f:
			raw = f.read()
	except OSError as e:
		raise ConfigError(f"failed to open {path}: {e}") from e
	return parse(raw)


def load_css(screen, path):
	if path is None:
		print("pylogout: no css file found, running unstyled", file=sys.stderr)
		return False
	provider = Gtk.CssProvider()
	try:
		provider.load_from_path(path)
	except GLib.Error as e:
		print(f"pylogout: failed to load {path}: {e.message}", file=sys.stderr)
		return False
	Gtk.StyleContext.add_provider_for_screen(
		screen, provider, Gtk.STYLE_PROVIDER_PRIORITY_APPLICATION)
	return True


def main(argv=None):
	args = build_parser().parse_args(argv)
	try:
		buttons = load_layout(find_config_file(LAYOUT_FILE, args.layout))
		options = build_options(args, buttons)
	except (ConfigError, GeometryError) as e:
		print(f"pylogout: {e}", file=sys.stderr)
		return 1

	for key, ids in duplicate_keybinds(buttons).items():
		print(f"pylogout: keybind '{key}' used by {', '.join(ids)}; '{ids[0]}' wins",
			file=sys.stderr)

	screen = Gdk.Screen.get_default()
	if screen is None:
		print("pylogout: could not connect to a display", file=sys.stderr)
		return 1
	load_css(screen, find_config_file(CSS_FILE, args.css))

	compositor = Compositor(buttons, options)
	controller = SessionController(compositor.close_all)
	compositor.present(controller)

	try:
		Gtk.main()
	except KeyboardInterrupt:
		return 0
	return 0


if __name__ == "__main__":
	sys.exit(main())
