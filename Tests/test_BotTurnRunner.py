import logbook

from BehaviorConfig import BehaviorConfig, SELECTION_MODE_RANDOM
from BotTurnRunner import BotTurnRunner
from Models import AttackExecution, ConstructionExecution, PlayerType, UnitType
from TestBase import FakeAttack, FakeTerraNullius, ScriptedRandom, TestBase


class BotTurnRunnerTests(TestBase):
    def _runner(self, game, bot, selectionMode: str = 'deterministic', random=None) -> BotTurnRunner:
        if random is None:
            random = ScriptedRandom()
        config = BehaviorConfig(triggerRatio=0.5, reserveRatio=0.25, expandRatio=0.125, selectionMode=selectionMode)
        return BotTurnRunner.create(random, game, bot, config)

    def test_attacks_weakest_bot_neighbor_then_builds(self):
        game = self.make_game(maxTroops=1000)
        bot = self.make_player('bot', troops=800, numTiles=3)
        dense = self.make_player('dense', troops=500, numTiles=100)
        sparse = self.make_player('sparse', troops=200, numTiles=100)
        self.make_neighbors(bot, dense, sparse)
        bot.buildable = {(UnitType.City, 2)}
        runner = self._runner(game, bot)
        self.begin_capturing_logging(logbook.DEBUG)

        queued = runner.take_turn()

        self.assertEqual(
            [
                AttackExecution(550, bot, 'sparse'),
                ConstructionExecution(bot, UnitType.City, 2),
            ],
            queued)
        self.assertIs(sparse, runner.behavior.enemy)

    def test_expands_into_unclaimed_land_when_saving_up(self):
        game = self.make_game(maxTroops=1000)
        bot = self.make_player('bot', troops=300)
        self.make_neighbors(bot, FakeTerraNullius(), self.make_player('other'))
        runner = self._runner(game, bot)

        queued = runner.take_turn()

        self.assertEqual([AttackExecution(175, bot, 'TerraNullius')], queued)
        self.assertIsNone(runner.behavior.enemy)

    def test_donates_only_while_at_peace(self):
        game = self.make_game(maxTroops=1000)
        bot = self.make_player('bot', troops=400, gold=40)
        ally = self.make_player('ally')
        self.ally(bot, ally)
        runner = self._runner(game, bot)

        runner.take_turn()
        self.assertEqual([('ally', 100)], bot.troop_donations)
        self.assertEqual([('ally', 10)], bot.gold_donations)

        attacker = self.make_player('attacker', PlayerType.Human)
        bot.attacks.append(FakeAttack(attacker, 50))
        bot.troop_count = 900
        runner.take_turn()
        self.assertIs(attacker, runner.behavior.enemy)
        self.assertEqual(1, len(bot.troop_donations))

    def test_random_mode_retaliates_against_largest_attacker(self):
        game = self.make_game(maxTroops=1000)
        bot = self.make_player('bot', troops=900)
        friend = self.make_player('friend')
        self.ally(bot, friend)
        self.make_neighbors(bot, friend)
        small = self.make_player('small', PlayerType.Human)
        large = self.make_player('large', PlayerType.Human)
        bot.attacks.extend([FakeAttack(small, 10), FakeAttack(large, 25)])
        runner = self._runner(game, bot, selectionMode=SELECTION_MODE_RANDOM)

        queued = runner.take_turn()

        self.assertIs(large, runner.behavior.enemy)
        self.assertIn(AttackExecution(650, bot, 'large'), queued)

    def test_each_turn_drains_its_own_intents(self):
        game = self.make_game(maxTroops=1000)
        bot = self.make_player('bot', troops=0)
        bot.buildable = {(UnitType.Factory, 0)}
        runner = self._runner(game, bot)

        first = runner.take_turn()
        self.assertEqual(0, len(runner.behavior.executions))
        second = runner.take_turn()

        self.assertEqual([ConstructionExecution(bot, UnitType.Factory, 0)], first)
        self.assertEqual([ConstructionExecution(bot, UnitType.Factory, 0)], second)
        self.assertEqual(0, len(runner.behavior.executions))

    def test_queue_does_not_grow_over_a_long_game(self):
        game = self.make_game(maxTroops=1000)
        bot = self.make_player('bot', troops=0)
        bot.buildable = {(UnitType.City, 0)}
        runner = self._runner(game, bot)

        for tick in range(1000):
            game.tick = tick
            self.assertEqual(1, len(runner.take_turn()))

        self.assertEqual(0, len(runner.behavior.executions))

    def test_rejects_unknown_selection_mode(self):
        game = self.make_game()
        bot = self.make_player('bot')
        behavior = self.make_behavior(game, bot)

        with self.assertRaises(AssertionError):
            BotTurnRunner(behavior, 'chaotic')
