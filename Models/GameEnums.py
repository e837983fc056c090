from __future__ import annotations

import typing

from enum import Enum, IntEnum


class PlayerType(Enum):
    Human = 'HUMAN'
    Bot = 'BOT'
    FakeHuman = 'FAKEHUMAN'


class Relation(IntEnum):
    """Ordered so that comparisons read naturally, ie `relation < Relation.Neutral` means malice."""
    Hostile = 0
    Distrustful = 1
    Neutral = 2
    Friendly = 3


class UnitType(Enum):
    City = 'City'
    Factory = 'Factory'
    DefensePost = 'Defense Post'
    MissileSilo = 'Missile Silo'
    SAMLauncher = 'SAM Launcher'
    Port = 'Port'
    Warship = 'Warship'


BOT_BUILD_PRIORITY: typing.List[UnitType] = [
    UnitType.City,
    UnitType.Factory,
    UnitType.DefensePost,
    UnitType.MissileSilo,
    UnitType.SAMLauncher,
]
"""The structures a bot will queue each tick, highest priority first. At most one of each per tick."""
