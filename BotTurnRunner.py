from __future__ import annotations

import logbook
import typing

from BehaviorConfig import BehaviorConfig, SELECTION_MODE_RANDOM, SELECTION_MODES
from BotBehavior import BotBehavior
from ExecutionQueue import ExecutionQueue
from Interfaces import GameInterface, PlayerInterface
from Models import ExecutionBase
from PseudoRandom import PseudoRandom


class BotTurnRunner(object):
    def __init__(self, behavior: BotBehavior, selectionMode: str):
        if selectionMode not in SELECTION_MODES:
            raise AssertionError(f'selectionMode must be one of {SELECTION_MODES}, was {selectionMode}')

        self.behavior: BotBehavior = behavior
        self.selection_mode: str = selectionMode

    @staticmethod
    def create(random: PseudoRandom, game: GameInterface, player: PlayerInterface, config: BehaviorConfig, executions: ExecutionQueue | None = None) -> BotTurnRunner:
        if executions is None:
            executions = ExecutionQueue()
        behavior = BotBehavior.from_config(random, game, player, executions, config)
        logbook.info(f'spawned bot behavior for {player.name()}: {str(config)}')
        return BotTurnRunner(behavior, config.selection_mode)

    def take_turn(self) -> typing.List[ExecutionBase]:
        """
        Runs every decision for one tick, in engine order.
        @return: the intents queued during this tick. The queue is left empty for the next tick.
        """
        behavior = self.behavior

        behavior.handle_alliance_requests()
        behavior.handle_alliance_extension_requests()
        behavior.forget_old_enemies()
        behavior.assist_allies()

        if self.selection_mode == SELECTION_MODE_RANDOM:
            enemy = behavior.select_random_enemy()
        else:
            enemy = behavior.select_enemy()

        if enemy is not None:
            behavior.send_attack(enemy)
        elif self._borders_unclaimed_land():
            behavior.send_attack(behavior.game.terra_nullius())

        if enemy is None:
            behavior.distribute_resources_to_allies()

        behavior.build_units()

        queued = behavior.executions.drain()
        logbook.debug(f'{behavior.player.name()} tick {behavior.game.ticks()} queued {len(queued)}')
        return queued

    def _borders_unclaimed_land(self) -> bool:
        for neighbor in self.behavior.player.neighbors():
            if not neighbor.is_player():
                return True
        return False
