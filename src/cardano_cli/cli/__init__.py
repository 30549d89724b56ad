"""CLI layer — argument grammar, command assembly and error boundary.

This package is the outermost layer of the application.  It may import
from ``core``, but ``core`` never imports from ``cli``.

The node override flags are exported here for the configuration layer,
which combines their ``Last`` slots with values from its own file.
"""

from cardano_cli.cli.override_options import (
    add_override_arguments,
    overrides_from_namespace,
    parse_node_overrides,
)

__all__: list[str] = [
    "add_override_arguments",
    "overrides_from_namespace",
    "parse_node_overrides",
]
