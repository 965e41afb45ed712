"""Run a command periodically and show its output fullscreen."""
