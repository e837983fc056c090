from __future__ import annotations

import typing

from abc import ABC, abstractmethod

from Models.GameEnums import PlayerType, Relation, UnitType


class TargetInterface(ABC):
    """Anything an attack can be sent at. Either a player or the unclaimed land sentinel."""

    @abstractmethod
    def is_player(self) -> bool:
        raise NotImplementedError()

    @abstractmethod
    def id(self) -> str:
        raise NotImplementedError()


class TerraNulliusInterface(TargetInterface):
    def is_player(self) -> bool:
        return False


class RelationEntry(object):
    def __init__(self, player: PlayerInterface, relation: Relation):
        self.player: PlayerInterface = player
        self.relation: Relation = relation

    def __str__(self) -> str:
        return f'{self.player.id()}: {self.relation.name}'

    def __repr__(self) -> str:
        return str(self)


class AttackInterface(ABC):
    @abstractmethod
    def attacker(self) -> PlayerInterface:
        raise NotImplementedError()

    @abstractmethod
    def troops(self) -> float:
        raise NotImplementedError()


class AllianceRequestInterface(ABC):
    @abstractmethod
    def requestor(self) -> PlayerInterface:
        raise NotImplementedError()

    @abstractmethod
    def accept(self):
        raise NotImplementedError()

    @abstractmethod
    def reject(self):
        raise NotImplementedError()


class AllianceInterface(ABC):
    @abstractmethod
    def other(self, player: PlayerInterface) -> PlayerInterface:
        """The party of this alliance that is not `player`."""
        raise NotImplementedError()

    @abstractmethod
    def only_one_agreed_to_extend(self) -> bool:
        """True when the alliance is expiring and exactly one party has asked to renew it."""
        raise NotImplementedError()


class PlayerInterface(TargetInterface):
    def is_player(self) -> bool:
        return True

    @abstractmethod
    def name(self) -> str:
        raise NotImplementedError()

    @abstractmethod
    def type(self) -> PlayerType:
        raise NotImplementedError()

    @abstractmethod
    def troops(self) -> float:
        raise NotImplementedError()

    @abstractmethod
    def gold(self) -> int:
        """Arbitrary precision."""
        raise NotImplementedError()

    @abstractmethod
    def tiles(self) -> typing.Iterable[int]:
        raise NotImplementedError()

    @abstractmethod
    def num_tiles_owned(self) -> int:
        raise NotImplementedError()

    @abstractmethod
    def neighbors(self) -> typing.List[PlayerInterface | TerraNulliusInterface]:
        raise NotImplementedError()

    @abstractmethod
    def relation(self, other: PlayerInterface) -> Relation:
        raise NotImplementedError()

    @abstractmethod
    def all_relations_sorted(self) -> typing.List[RelationEntry]:
        """Most hostile first."""
        raise NotImplementedError()

    @abstractmethod
    def update_relation(self, other: PlayerInterface, delta: int):
        raise NotImplementedError()

    @abstractmethod
    def alliances(self) -> typing.List[AllianceInterface]:
        raise NotImplementedError()

    @abstractmethod
    def allies(self) -> typing.List[PlayerInterface]:
        raise NotImplementedError()

    @abstractmethod
    def is_allied_with(self, other: PlayerInterface) -> bool:
        raise NotImplementedError()

    @abstractmethod
    def is_friendly(self, other: PlayerInterface) -> bool:
        """Allied or on the same team."""
        raise NotImplementedError()

    @abstractmethod
    def is_traitor(self) -> bool:
        raise NotImplementedError()

    @abstractmethod
    def incoming_alliance_requests(self) -> typing.List[AllianceRequestInterface]:
        raise NotImplementedError()

    @abstractmethod
    def incoming_attacks(self) -> typing.List[AttackInterface]:
        raise NotImplementedError()

    @abstractmethod
    def targets(self) -> typing.List[PlayerInterface]:
        """Players this player has asked its allies to help attack."""
        raise NotImplementedError()

    @abstractmethod
    def can_build(self, unitType: UnitType, tile: int) -> bool:
        raise NotImplementedError()

    @abstractmethod
    def donate_troops(self, recipient: PlayerInterface, troops: int):
        raise NotImplementedError()

    @abstractmethod
    def donate_gold(self, recipient: PlayerInterface, gold: int):
        raise NotImplementedError()


class GameConfigInterface(ABC):
    @abstractmethod
    def max_troops(self, player: PlayerInterface) -> float:
        raise NotImplementedError()


class GameInterface(ABC):
    @abstractmethod
    def ticks(self) -> int:
        raise NotImplementedError()

    @abstractmethod
    def config(self) -> GameConfigInterface:
        raise NotImplementedError()

    @abstractmethod
    def terra_nullius(self) -> TerraNulliusInterface:
        raise NotImplementedError()

    @abstractmethod
    def manhattan_dist(self, tileA: int, tileB: int) -> int:
        raise NotImplementedError()
