"""External adapters for the Clientele customer registry.

This package contains all code that touches the outside world and
provides implementations of the core port interfaces.

Adapter Organization:

- ids/: Sources of candidate ids for the id pool (random, seedable)
- cli/: Command-line interface commands
"""
