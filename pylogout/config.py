# Command line flags, config file lookup and presentation options

import argparse
import os
from dataclasses import dataclass

from . import __version__
from .geometry import FixedMargins, auto_margins

APP_NAME = "pylogout"
LEGACY_NAME = "wlogout"
LAYOUT_FILE = "layout"
CSS_FILE = "style.css"

OVERLAY = "layer-shell"
FALLBACK = "xdg"


@dataclass(frozen=True)
class Options:
	columns: int = 3
	row_spacing: int = 0
	column_spacing: int = 0
	inner_margin: int = 0
	margins: object = FixedMargins()
	protocol: str = OVERLAY
	primary_monitor: int = None
	show_binds: bool = False
	span: bool = True
	mirror: bool = False
	pointer: bool = True

	@property
	def overlay(self):
		return self.protocol == OVERLAY


# ── Paths ───────────────────────────────────────────────────────────────────

def config_dirs(environ=None):
	environ = os.environ if environ is None else environ
	home = environ.get("HOME") or os.path.expanduser("~")
	bases = []
	if environ.get("XDG_CONFIG_HOME"):
		bases.append(environ["XDG_CONFIG_HOME"])
	bases += [os.path.join(home, ".config"), "/etc", "/usr/local/etc"]
	return [os.path.join(base, name) for base in bases for name in (APP_NAME, LEGACY_NAME)]


def find_config_file(filename, explicit=None, environ=None):
	"""Return the first existing *filename* in the config dirs, or None."""
	if explicit:
		return explicit
	for directory in config_dirs(environ):
		path = os.path.join(directory, filename)
		if os.path.isfile(path):
			return path
	return None


# ── Command line ────────────────────────────────────────────────────────────

def _non_negative(value):
	n = int(value)
	if n < 0:
		raise argparse.ArgumentTypeError(f"{value} must not be negative")
	return n


def _positive(value):
	n = int(value)
	if n < 1:
		raise argparse.ArgumentTypeError(f"{value} must be at least 1")
	return n


def build_parser():
	parser = argparse.ArgumentParser(
		prog=APP_NAME,
		description="Full-screen logout menu for Wayland and X11")
	parser.add_argument("-l", "--layout", help="specify a layout file")
	parser.add_argument("-C", "--css", help="specify a css file")
	parser.add_argument("-b", "--buttons-per-row", type=_positive, default=3,
		help="set the number of buttons per row")
	parser.add_argument("-c", "--column-spacing", type=_non_negative, default=0,
		help="set space between buttons columns")
	parser.add_argument("-r", "--row-spacing", type=_non_negative, default=0,
		help="set space between buttons rows")
	parser.add_argument("-m", "--margin", type=_non_negative, default=0,
		help="set margin around each button")
	parser.add_argument("-L", "--margin-left", type=_non_negative, default=230)
	parser.add_argument("-R", "--margin-right", type=_non_negative, default=230)
	parser.add_argument("-T", "--margin-top", type=_non_negative, default=230)
	parser.add_argument("-B", "--margin-bottom", type=_non_negative, default=230)
	parser.add_argument("-a", "--auto-margins", action="store_true",
		help="center the buttons on every monitor instead of using fixed margins")
	parser.add_argument("--button-width", type=_positive,
		help="button width used by --auto-margins")
	parser.add_argument("--button-height", type=_positive,
		help="button height used by --auto-margins")
	parser.add_argument("-p", "--protocol", choices=(OVERLAY, FALLBACK), default=OVERLAY,
		help="use layer-shell or xdg protocol")
	parser.add_argument("-s", "--show-binds", action="store_true",
		help="show the keybinds on their corresponding button")
	parser.add_argument("-n", "--no-span", action="store_true",
		help="stop from spanning across multiple monitors")
	parser.add_argument("-M", "--mirror", action="store_true",
		help="show the buttons on every monitor, not only the primary one")
	parser.add_argument("-P", "--primary-monitor", type=_non_negative,
		help="set the primary monitor")
	parser.add_argument("-x", "--no-pointer", action="store_true",
		help="do not close when clicking outside the buttons")
	parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
	return parser


def build_options(args, buttons):
	"""Turn parsed flags into Options; raises GeometryError for bad auto margins."""
	if args.auto_margins:
		margins = auto_margins(
			buttons,
			inner_margin=args.margin,
			row_spacing=args.row_spacing,
			column_spacing=args.column_spacing,
			button_width=args.button_width,
			button_height=args.button_height)
	else:
		margins = FixedMargins(
			top=args.margin_top,
			bottom=args.margin_bottom,
			left=args.margin_left,
			right=args.margin_right)
	return Options(
		columns=args.buttons_per_row,
		row_spacing=args.row_spacing,
		column_spacing=args.column_spacing,
		inner_margin=args.margin,
		margins=margins,
		protocol=args.protocol,
		primary_monitor=args.primary_monitor,
		show_binds=args.show_binds,
		span=not args.no_span,
		mirror=args.mirror,
		pointer=not args.no_pointer,
	)
