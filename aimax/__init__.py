"""aimax: install agent, rule, command and skill definitions into ~/.claude."""

__version__ = "0.1.0"
