import typing

EMOJI_TABLE: typing.List[typing.List[str]] = [
    ["😀", "😊", "🥰", "😇", "😎"],
    ["😞", "🥺", "😭", "😱", "😡"],
    ["😈", "🤡", "🥱", "🫡", "🖕"],
    ["👋", "👏", "✋", "🙏", "💪"],
    ["👍", "👎", "🫴", "🤌", "🤦"],
    ["🤝", "🆘", "🕊️", "🏳️", "⏳"],
    ["🔥", "💥", "💀", "☢️", "⚠️"],
    ["↖️", "⬆️", "↗️", "👑", "🥇"],
    ["⬅️", "🎯", "➡️", "🥈", "🥉"],
    ["↙️", "⬇️", "↘️", "❤️", "💔"],
    ["💰", "⚓", "⛵", "🏡", "🛡️"],
]

FLATTENED_EMOJI_TABLE: typing.List[str] = [emoji for row in EMOJI_TABLE for emoji in row]


def emoji_index(symbol: str) -> int:
    try:
        return FLATTENED_EMOJI_TABLE.index(symbol)
    except ValueError:
        raise AssertionError(f'{symbol} is not in the emoji table')
