from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Client:
    id: str
    name: str
    phone: str
