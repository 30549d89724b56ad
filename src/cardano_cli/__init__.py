"""cardano-cli — validated command assembly for a Cardano node client.

Turns raw command-line tokens into one immutable, fully validated
command value, ready for an external dispatcher.
"""

from cardano_cli.version import __version__

__all__: list[str] = ["__version__"]
