from __future__ import annotations

import json


def dumps_pretty(payload: object) -> str:
    return json.dumps(payload, indent=2, sort_keys=True, ensure_ascii=False)


__all__ = ["dumps_pretty"]
