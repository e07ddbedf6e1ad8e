# Shell command execution for button actions

import subprocess
import sys


def run_command(command):
	"""Run *command* through the shell and capture both output streams.

	The exit status is returned but never raised on.
	"""
	return subprocess.run(command, shell=True, capture_output=True, check=False)


def forward_output(result, stdout=None, stderr=None):
	stdout = stdout if stdout is not None else sys.stdout.buffer
	stderr = stderr if stderr is not None else sys.stderr.buffer
	if result.stdout:
		stdout.write(result.stdout)
		stdout.flush()
	if result.stderr:
		stderr.write(result.stderr)
		stderr.flush()
