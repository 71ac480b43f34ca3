"""Run the natprint command line as a module.

    python -m natprint encode --base 16 255 4096
    python -m natprint check --type uint64
    python -m natprint bench --strategy lr --strategy modulo

NATPRINT_BASE, NATPRINT_STRATEGY and NATPRINT_TYPE set the defaults for
--base, --strategy and --type.
"""
import sys

from natprint.cli import main

sys.exit(main(sys.argv[1:]))
