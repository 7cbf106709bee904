"""Allow ``python -m echo_relay``."""

from .cli import main

raise SystemExit(main())
