"""Allow ``python -m msgbundle`` to run the message resolver."""

from msgbundle.resolver import main

raise SystemExit(main())
