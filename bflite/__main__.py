from __future__ import annotations

from bflite.cli import main

raise SystemExit(main())
