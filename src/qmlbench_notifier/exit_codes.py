from __future__ import annotations

OK = 0
ERR_USAGE = 1
ERR_MAIL = 2
