# Single-shot action dispatch: Idle -> Firing -> Terminated

from dataclasses import dataclass
from typing import Callable

from .command import forward_output, run_command

IDLE = "idle"
FIRING = "firing"
TERMINATED = "terminated"

CANCEL_KEY = "Escape"


@dataclass(frozen=True)
class ActionBinding:
	command: str
	on_complete: Callable[[], None]
	keybind: str = None


class SessionController:
	"""Owns the run state shared by every window and input handler.

	``fire`` is the only path that runs a command; the state is checked and
	moved out of IDLE before anything else happens, so a second queued event
	(click after keybind, two windows, ...) finds the session already firing
	and does nothing.
	"""

	def __init__(self, teardown, runner=run_command, stdout=None, stderr=None):
		self.state = IDLE
		self.has_fired = False
		self.bindings = []
		self._teardown = teardown
		self._runner = runner
		self._stdout = stdout
		self._stderr = stderr

	def bind(self, button):
		binding = ActionBinding(button.action, self.terminate, button.keybind)
		self.bindings.append(binding)
		return binding

	def bind_all(self, buttons):
		return [self.bind(button) for button in buttons]

	def fire(self, binding):
		if self.state != IDLE or not binding.command:
			return False
		self.state = FIRING
		self.has_fired = True
		try:
			result = self._runner(binding.command)
			forward_output(result, self._stdout, self._stderr)
		finally:
			binding.on_complete()
		return True

	def cancel(self):
		if self.state != IDLE:
			return False
		self.terminate()
		return True

	def terminate(self):
		if self.state == TERMINATED:
			return
		self.state = TERMINATED
		self._teardown()

	def match_keybind(self, keyname):
		for binding in self.bindings:
			if binding.keybind is not None and binding.keybind == keyname:
				return binding
		return None

	def on_key_release(self, keyname):
		"""Route a released key: Escape cancels, a keybind fires its button."""
		if keyname == CANCEL_KEY:
			return self.cancel()
		binding = self.match_keybind(keyname)
		if binding is None:
			return False
		return self.fire(binding)
