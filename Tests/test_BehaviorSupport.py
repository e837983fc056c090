import os
import tempfile

import logbook

import BotLogging
from BehaviorConfig import BehaviorConfig, load_behavior_config, SELECTION_MODE_RANDOM
from ExecutionQueue import ExecutionQueue
from Models import AllianceExtensionExecution, EmojiExecution
from PseudoRandom import PseudoRandom
from TestBase import TestBase
from Utils.EmojiTable import emoji_index, FLATTENED_EMOJI_TABLE


class PseudoRandomTests(TestBase):
    def test_same_seed_same_decisions(self):
        a = PseudoRandom(1234)
        b = PseudoRandom(1234)

        self.assertEqual([a.chance(3) for _ in range(50)], [b.chance(3) for _ in range(50)])
        self.assertEqual(a.shuffle_array(range(20)), b.shuffle_array(range(20)))
        self.assertEqual(a.next_int(0, 1000), b.next_int(0, 1000))

    def test_chance_one_always_passes(self):
        r = PseudoRandom(5)
        self.assertTrue(all(r.chance(1) for _ in range(100)))

    def test_chance_frequency_roughly_one_over_odds(self):
        r = PseudoRandom(99)
        hits = sum(1 for _ in range(6000) if r.chance(1.5))
        self.assertGreater(hits, 3700)
        self.assertLess(hits, 4300)

    def test_shuffle_array_leaves_input_alone(self):
        r = PseudoRandom(7)
        items = list(range(10))
        shuffled = r.shuffle_array(items)

        self.assertEqual(list(range(10)), items)
        self.assertEqual(sorted(shuffled), items)

    def test_rand_element_requires_elements(self):
        r = PseudoRandom(7)
        self.assertEqual('only', r.rand_element(['only']))
        with self.assertRaises(AssertionError):
            r.rand_element([])


class BehaviorConfigTests(TestBase):
    def _write_cfg(self, contents: str) -> str:
        handle, path = tempfile.mkstemp(suffix='.txt')
        with os.fdopen(handle, 'w') as file:
            file.write(contents)
        self.addCleanup(os.remove, path)
        return path

    def test_loads_key_value_file_over_defaults(self):
        path = self._write_cfg('# bot personality\ntrigger_ratio=0.6\nreserve_ratio = 0.4\nselection_mode=random\nlog_folder=/tmp/logs\n')

        config = load_behavior_config(path)

        self.assertEqual(0.6, config.trigger_ratio)
        self.assertEqual(0.4, config.reserve_ratio)
        self.assertEqual(0.15, config.expand_ratio)
        self.assertEqual(100, config.enemy_memory_ticks)
        self.assertEqual(SELECTION_MODE_RANDOM, config.selection_mode)

    def test_missing_required_key(self):
        path = self._write_cfg('trigger_ratio=0.6\n')

        with self.assertRaises(AssertionError):
            load_behavior_config(path, requiredKeys=['reserve_ratio'])

    def test_rejects_out_of_range_ratio(self):
        with self.assertRaises(AssertionError):
            BehaviorConfig(triggerRatio=1.5)

        path = self._write_cfg('expand_ratio=-0.1\n')
        with self.assertRaises(AssertionError):
            load_behavior_config(path)

    def test_rejects_unknown_mode(self):
        with self.assertRaises(AssertionError):
            BehaviorConfig(selectionMode='chaotic')

    def test_randomized_stays_in_personality_ranges(self):
        r = PseudoRandom(3)
        for _ in range(50):
            config = BehaviorConfig.randomized(r)
            self.assertTrue(0.5 <= config.trigger_ratio < 0.6)
            self.assertTrue(0.3 <= config.reserve_ratio < 0.6)
            self.assertTrue(0.1 <= config.expand_ratio < 0.2)


class ExecutionQueueTests(TestBase):
    def test_drain_empties_queue_in_order(self):
        bot = self.make_player('bot')
        queue = ExecutionQueue()
        first = AllianceExtensionExecution(bot, 'a')
        second = EmojiExecution(bot, 'a', 3)

        queue.add_execution(first)
        queue.add_execution(second)

        self.assertEqual(2, len(queue))
        self.assertEqual([first, second], queue.pending())
        self.assertEqual([first, second], queue.drain())
        self.assertEqual(0, len(queue))
        self.assertEqual([], queue.drain())


class EmojiTableTests(TestBase):
    def test_emoji_index_round_trips(self):
        idx = emoji_index("👍")
        self.assertEqual("👍", FLATTENED_EMOJI_TABLE[idx])

    def test_unknown_emoji(self):
        with self.assertRaises(AssertionError):
            emoji_index("not an emoji")

    def test_package_reexports_emoji_helpers(self):
        import Utils

        self.assertIs(emoji_index, Utils.emoji_index)
        self.assertIs(FLATTENED_EMOJI_TABLE, Utils.FLATTENED_EMOJI_TABLE)


class BotLoggingTests(TestBase):
    def test_set_up_logger_is_idempotent(self):
        self.addCleanup(BotLogging.tear_down_logger)

        BotLogging.set_up_logger(logbook.WARNING)
        BotLogging.set_up_logger(logbook.DEBUG)

        self.assertTrue(BotLogging.LOGGING_SET_UP)
        self.assertEqual(logbook.DEBUG, BotLogging._HANDLER.level)
