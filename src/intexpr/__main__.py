"""Entry point for ``python -m intexpr``."""

from intexpr.cli import main

raise SystemExit(main())
