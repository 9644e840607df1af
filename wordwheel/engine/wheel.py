import random
from typing import List

from .models import Level, WheelLetter


def build_wheel(level: Level) -> List[WheelLetter]:
    """
    Lay the level's base letters out on the wheel.

    The display order is a shuffle seeded by the level id, so a level always
    shows the same wheel. If the shuffle happens to spell the base letters
    the first and third slots are swapped. Each letter keeps its
    `original_index`, which is what guesses refer to.
    """
    rng = random.Random(level.id)
    order = list(range(len(level.base_letters)))
    rng.shuffle(order)
    if order == sorted(order):
        order[0], order[2] = order[2], order[0]

    return [
        WheelLetter(char=level.base_letters[index], original_index=index, position=position)
        for position, index in enumerate(order)
    ]
