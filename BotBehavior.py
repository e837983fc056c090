from __future__ import annotations

import math

import logbook

from BehaviorConfig import BehaviorConfig, DEFAULT_ENEMY_MEMORY_TICKS
from ExecutionQueue import ExecutionQueue
from Interfaces import AllianceRequestInterface, GameInterface, PlayerInterface, TerraNulliusInterface
from Models import AllianceExtensionExecution, AttackExecution, BOT_BUILD_PRIORITY, ConstructionExecution, EmojiExecution, PlayerType, Relation
from PseudoRandom import PseudoRandom
from Utils.EmojiTable import emoji_index

ASSIST_RELATION_PENALTY = -20
"""Joining an ally's war costs some goodwill with that ally."""

MAX_ALLIANCES_BEFORE_REJECT = 3
MUCH_LARGER_TILE_MULTIPLIER = 3

DONATION_FRACTION = 0.25


class BotBehavior(object):
    """
    Decision making for one bot controlled player. The engine polls the public methods once per tick; the only
    state carried between ticks is the current enemy and the tick it was picked.
    """

    def __init__(
            self,
            random: PseudoRandom,
            game: GameInterface,
            player: PlayerInterface,
            executions: ExecutionQueue,
            triggerRatio: float,
            reserveRatio: float,
            expandRatio: float,
            enemyMemoryTicks: int = DEFAULT_ENEMY_MEMORY_TICKS,
    ):
        self.random: PseudoRandom = random
        self.game: GameInterface = game
        self.player: PlayerInterface = player
        self.executions: ExecutionQueue = executions

        self.trigger_ratio: float = triggerRatio
        self.reserve_ratio: float = reserveRatio
        self.expand_ratio: float = expandRatio
        self.enemy_memory_ticks: int = enemyMemoryTicks

        self.enemy: PlayerInterface | None = None
        self.enemy_updated_tick: int | None = None
        """None until the first enemy is ever set. Clearing the enemy leaves this alone."""

        self.assist_accept_emoji: int = emoji_index("👍")

    @staticmethod
    def from_config(
            random: PseudoRandom,
            game: GameInterface,
            player: PlayerInterface,
            executions: ExecutionQueue,
            config: BehaviorConfig
    ) -> BotBehavior:
        return BotBehavior(
            random,
            game,
            player,
            executions,
            triggerRatio=config.trigger_ratio,
            reserveRatio=config.reserve_ratio,
            expandRatio=config.expand_ratio,
            enemyMemoryTicks=config.enemy_memory_ticks,
        )

    def __str__(self) -> str:
        enemyName = self.enemy.name() if self.enemy is not None else 'none'
        return f'{self.player.name()} enemy {enemyName} (set {self.enemy_updated_tick})'

    def __repr__(self) -> str:
        return str(self)

    def min_distance_between_players(self, playerA: PlayerInterface, playerB: PlayerInterface) -> float:
        """Minimum manhattan distance between any tile of playerA and any tile of playerB. inf if either owns nothing."""
        tilesA = list(playerA.tiles())
        tilesB = list(playerB.tiles())
        minDist = math.inf
        for tileA in tilesA:
            for tileB in tilesB:
                dist = self.game.manhattan_dist(tileA, tileB)
                if dist < minDist:
                    minDist = dist
        return minDist

    def handle_alliance_requests(self):
        for req in self.player.incoming_alliance_requests():
            if should_accept_alliance_request(self.player, req):
                logbook.info(f'{self.player.name()} accepting alliance request from {req.requestor().name()}')
                req.accept()
            else:
                logbook.info(f'{self.player.name()} rejecting alliance request from {req.requestor().name()}')
                req.reject()

    def handle_alliance_extension_requests(self):
        for alliance in self.player.alliances():
            # only the human ally can ask to renew, and we only answer once.
            if not alliance.only_one_agreed_to_extend():
                continue

            human = alliance.other(self.player)
            if self.player.type() == PlayerType.FakeHuman and self.player.relation(human) == Relation.Neutral:
                if not self.random.chance(1.5):
                    logbook.debug(f'{self.player.name()} lukewarm on {human.name()}, not extending this tick')
                    continue

            logbook.info(f'{self.player.name()} agreeing to extend alliance with {human.name()}')
            self.executions.add_execution(AllianceExtensionExecution(self.player, human.id()))

    def emoji(self, recipient: PlayerInterface, emoji: int):
        if recipient.type() != PlayerType.Human:
            return
        self.executions.add_execution(EmojiExecution(self.player, recipient.id(), emoji))

    def set_new_enemy(self, newEnemy: PlayerInterface | None):
        if newEnemy is not None:
            logbook.info(f'{self.player.name()} new enemy {newEnemy.name()} at tick {self.game.ticks()}')
        self.enemy = newEnemy
        self.enemy_updated_tick = self.game.ticks()

    def clear_enemy(self):
        self.enemy = None

    def forget_old_enemies(self):
        if self.enemy_updated_tick is None:
            return

        if self.game.ticks() - self.enemy_updated_tick > self.enemy_memory_ticks:
            if self.enemy is not None:
                logbook.info(f'{self.player.name()} forgetting stale enemy {self.enemy.name()}')
            self.clear_enemy()

    def has_sufficient_troops(self) -> bool:
        maxTroops = self.game.config().max_troops(self.player)
        if maxTroops <= 0:
            return False
        ratio = self.player.troops() / maxTroops
        return ratio >= self.trigger_ratio

    def check_incoming_attacks(self):
        """Switch to whoever is hitting us hardest. Ties go to the first attack seen."""
        largestAttack = 0
        largestAttacker: PlayerInterface | None = None
        for attack in self.player.incoming_attacks():
            if attack.troops() <= largestAttack:
                continue
            largestAttack = attack.troops()
            largestAttacker = attack.attacker()

        if largestAttacker is not None:
            logbook.info(f'{self.player.name()} retaliating against {largestAttacker.name()} ({largestAttack:.0f} incoming)')
            self.set_new_enemy(largestAttacker)

    def get_neighbor_traitor_to_attack(self) -> PlayerInterface | None:
        traitors = [n for n in self.player.neighbors() if n.is_player() and n.is_traitor()]
        if len(traitors) == 0:
            return None
        return self.random.rand_element(traitors)

    def assist_allies(self):
        for ally in self.player.allies():
            if len(ally.targets()) == 0:
                continue
            if self.player.relation(ally) < Relation.Friendly:
                continue

            for target in ally.targets():
                if target.id() == self.player.id():
                    continue
                if self.player.is_allied_with(target):
                    continue

                logbook.info(f'{self.player.name()} assisting {ally.name()} against {target.name()}')
                self.player.update_relation(ally, ASSIST_RELATION_PENALTY)
                self.set_new_enemy(target)
                self.emoji(ally, self.assist_accept_emoji)
                return

    def select_enemy(self) -> PlayerInterface | None:
        """Prefers the weakest bot neighbor, then whoever attacks us hardest, then whoever we hate."""
        if self.enemy is None:
            # save up until the trigger ratio
            if not self.has_sufficient_troops():
                return None

            bots = [n for n in self.player.neighbors() if n.is_player() and n.type() == PlayerType.Bot]
            lowestDensityBot: PlayerInterface | None = None
            lowestDensity = math.inf
            for bot in bots:
                density = _troop_density(bot)
                if density < lowestDensity:
                    lowestDensity = density
                    lowestDensityBot = bot

            if lowestDensityBot is not None:
                self.set_new_enemy(lowestDensityBot)

            if self.enemy is None:
                self.check_incoming_attacks()

            if self.enemy is None:
                relations = self.player.all_relations_sorted()
                if len(relations) > 0 and relations[0].relation == Relation.Hostile:
                    self.set_new_enemy(relations[0].player)

        return self.enemy_sanity_check()

    def select_random_enemy(self) -> PlayerInterface | None:
        if self.enemy is None:
            if not self.has_sufficient_troops():
                return None

            # every neighbor that survives the filters overwrites the last, so the last one in shuffled order wins.
            for neighbor in self.random.shuffle_array(self.player.neighbors()):
                if not neighbor.is_player():
                    continue
                if self.player.is_friendly(neighbor):
                    continue
                if neighbor.type() == PlayerType.FakeHuman:
                    if self.random.chance(2):
                        continue
                self.set_new_enemy(neighbor)

            if self.enemy is None:
                self.check_incoming_attacks()

            if self.enemy is None:
                toAttack = self.get_neighbor_traitor_to_attack()
                if toAttack is not None:
                    if not self.player.is_friendly(toAttack) and self.random.chance(3):
                        self.set_new_enemy(toAttack)

        return self.enemy_sanity_check()

    def enemy_sanity_check(self) -> PlayerInterface | None:
        """Never return ourselves, an ally, or a teammate. Friendliness can change under us between ticks."""
        if self.enemy is not None:
            if self.enemy.id() == self.player.id() or self.player.is_friendly(self.enemy):
                logbook.info(f'{self.player.name()} dropping enemy {self.enemy.name()}, no longer a valid target')
                self.clear_enemy()
        return self.enemy

    def send_attack(self, target: PlayerInterface | TerraNulliusInterface):
        # breaking alliances is the caller's decision, never attack friendlies from here.
        if target.is_player() and self.player.is_friendly(target):
            logbook.debug(f'{self.player.name()} refusing to attack friendly {target.name()}')
            return

        maxTroops = self.game.config().max_troops(self.player)
        reserveRatio = self.reserve_ratio if target.is_player() else self.expand_ratio
        reserveTroops = maxTroops * reserveRatio
        troops = self.player.troops() - reserveTroops
        if troops < 1:
            logbook.debug(f'{self.player.name()} holding reserve, only {troops:.1f} available')
            return

        targetId = target.id() if target.is_player() else self.game.terra_nullius().id()
        logbook.info(f'{self.player.name()} attacking {targetId} with {troops:.1f}')
        self.executions.add_execution(AttackExecution(troops, self.player, targetId))

    def distribute_resources_to_allies(self):
        allies = self.player.allies()
        if len(allies) == 0:
            return

        troopsToSend = math.floor(self.player.troops() * DONATION_FRACTION)
        goldToSend = self.player.gold() // 4

        if troopsToSend <= 0 and goldToSend <= 0:
            return

        # every ally gets the full share, it is not split between them.
        for ally in allies:
            if troopsToSend > 0:
                self.player.donate_troops(ally, troopsToSend)
            if goldToSend > 0:
                self.player.donate_gold(ally, goldToSend)

        logbook.info(f'{self.player.name()} donated {troopsToSend} troops and {goldToSend} gold to each of {len(allies)} allies')

    def build_units(self):
        for unitType in BOT_BUILD_PRIORITY:
            for tile in self.player.tiles():
                if self.player.can_build(unitType, tile):
                    logbook.info(f'{self.player.name()} building {unitType.value} @{tile}')
                    self.executions.add_execution(ConstructionExecution(self.player, unitType, tile))
                    break


def _troop_density(player: PlayerInterface) -> float:
    """Troops per owned tile. A player with no land never wins a lowest-density search."""
    numTiles = player.num_tiles_owned()
    if numTiles <= 0:
        return math.inf
    return player.troops() / numTiles


def should_accept_alliance_request(player: PlayerInterface, request: AllianceRequestInterface) -> bool:
    requestor = request.requestor()
    if player.relation(requestor) < Relation.Neutral:
        return False  # malice
    if requestor.is_traitor():
        return False
    if requestor.num_tiles_owned() > player.num_tiles_owned() * MUCH_LARGER_TILE_MULTIPLIER:
        return True  # appease
    if len(requestor.alliances()) >= MAX_ALLIANCES_BEFORE_REJECT:
        return False
    return True
