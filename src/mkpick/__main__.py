"""Allow ``python -m mkpick``."""

from mkpick.cli.main import main

raise SystemExit(main())
