from __future__ import annotations

import pathlib

import logbook
import typing

from PseudoRandom import PseudoRandom

SELECTION_MODE_DETERMINISTIC = 'deterministic'
SELECTION_MODE_RANDOM = 'random'
SELECTION_MODES = (SELECTION_MODE_DETERMINISTIC, SELECTION_MODE_RANDOM)

DEFAULT_ENEMY_MEMORY_TICKS = 100

_RATIO_KEYS = ('trigger_ratio', 'reserve_ratio', 'expand_ratio')


class BehaviorConfig(object):
    def __init__(
            self,
            triggerRatio: float = 0.5,
            reserveRatio: float = 0.3,
            expandRatio: float = 0.15,
            enemyMemoryTicks: int = DEFAULT_ENEMY_MEMORY_TICKS,
            selectionMode: str = SELECTION_MODE_DETERMINISTIC,
    ):
        self.trigger_ratio: float = triggerRatio
        """How full (troops / max troops) the bot must be before it will pick a new fight."""

        self.reserve_ratio: float = reserveRatio
        """Fraction of max troops held back when attacking another player."""

        self.expand_ratio: float = expandRatio
        """Fraction of max troops held back when expanding into unclaimed land."""

        self.enemy_memory_ticks: int = enemyMemoryTicks
        """An enemy untouched for longer than this is forgotten."""

        self.selection_mode: str = selectionMode

        self.validate()

    def validate(self):
        for key in _RATIO_KEYS:
            val = getattr(self, key)
            if val < 0.0 or val > 1.0:
                raise AssertionError(f'{key} must be within [0, 1], was {val}')

        if self.enemy_memory_ticks < 0:
            raise AssertionError(f'enemy_memory_ticks must not be negative, was {self.enemy_memory_ticks}')

        if self.selection_mode not in SELECTION_MODES:
            raise AssertionError(f'selection_mode must be one of {SELECTION_MODES}, was {self.selection_mode}')

    @staticmethod
    def randomized(random: PseudoRandom, selectionMode: str = SELECTION_MODE_DETERMINISTIC) -> BehaviorConfig:
        """Per bot personality. Some bots save up longer, some keep a fatter reserve."""
        return BehaviorConfig(
            triggerRatio=random.next_int(50, 60) / 100,
            reserveRatio=random.next_int(30, 60) / 100,
            expandRatio=random.next_int(10, 20) / 100,
            selectionMode=selectionMode,
        )

    def __str__(self) -> str:
        return f'trig{self.trigger_ratio:.2f} res{self.reserve_ratio:.2f} exp{self.expand_ratio:.2f} mem{self.enemy_memory_ticks} {self.selection_mode}'

    def __repr__(self) -> str:
        return str(self)


def load_behavior_config(cfgPath: str | pathlib.Path, requiredKeys: typing.Iterable[str] = ()) -> BehaviorConfig:
    """
    Reads a key=value file. Lines without an '=' are ignored, unknown keys are logged and ignored.
    @param cfgPath:
    @param requiredKeys: keys that must be present in the file rather than falling back to defaults.
    @return:
    """
    with open(cfgPath, 'r') as file:
        data = file.read()
    cfgContents = data.splitlines()

    values: typing.Dict[str, str] = {}
    for line in cfgContents:
        if "=" not in line:
            continue

        key, value = line.split('=', 1)
        values[key.strip()] = value.strip()

    for key in requiredKeys:
        if key not in values:
            raise AssertionError(f'Unable to find {key} in {cfgPath}')

    config = BehaviorConfig()
    for key, value in values.items():
        if key in _RATIO_KEYS:
            setattr(config, key, float(value))
        elif key == 'enemy_memory_ticks':
            config.enemy_memory_ticks = int(value)
        elif key == 'selection_mode':
            config.selection_mode = value
        else:
            logbook.info(f'ignoring unknown behavior config key {key} in {cfgPath}')

    config.validate()
    return config
