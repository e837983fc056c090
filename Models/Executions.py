from __future__ import annotations

import typing

from Models.GameEnums import UnitType

if typing.TYPE_CHECKING:
    from Interfaces import PlayerInterface


class ExecutionBase(object):
    """An intent for the execution layer to apply. Never applied by the bot itself."""

    def _key(self) -> tuple:
        raise NotImplementedError()

    def __eq__(self, other):
        if type(other) is not type(self):
            return False
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __repr__(self) -> str:
        return str(self)


class AttackExecution(ExecutionBase):
    def __init__(self, troops: float, attacker: PlayerInterface, defenderId: str):
        self.troops: float = troops
        self.attacker: PlayerInterface = attacker
        self.defender_id: str = defenderId
        """Either a player id or the terra nullius id."""

    def _key(self) -> tuple:
        return self.troops, self.attacker.id(), self.defender_id

    def __str__(self) -> str:
        return f'Attack {self.attacker.id()} -> {self.defender_id} with {self.troops:.1f}'


class ConstructionExecution(ExecutionBase):
    def __init__(self, player: PlayerInterface, unitType: UnitType, tile: int):
        self.player: PlayerInterface = player
        self.unit_type: UnitType = unitType
        self.tile: int = tile

    def _key(self) -> tuple:
        return self.player.id(), self.unit_type, self.tile

    def __str__(self) -> str:
        return f'Build {self.unit_type.value} for {self.player.id()} @{self.tile}'


class AllianceExtensionExecution(ExecutionBase):
    def __init__(self, player: PlayerInterface, otherId: str):
        self.player: PlayerInterface = player
        self.other_id: str = otherId

    def _key(self) -> tuple:
        return self.player.id(), self.other_id

    def __str__(self) -> str:
        return f'Extend alliance {self.player.id()} <-> {self.other_id}'


class EmojiExecution(ExecutionBase):
    def __init__(self, sender: PlayerInterface, recipientId: str, emoji: int):
        self.sender: PlayerInterface = sender
        self.recipient_id: str = recipientId
        self.emoji: int = emoji
        """Index into the flattened emoji table."""

    def _key(self) -> tuple:
        return self.sender.id(), self.recipient_id, self.emoji

    def __str__(self) -> str:
        return f'Emoji {self.emoji} {self.sender.id()} -> {self.recipient_id}'
