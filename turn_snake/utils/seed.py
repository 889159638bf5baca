import random


# Random source for food placement; a seed makes a run reproducible
def make_rng(seed=None):
    if seed is not None:
        return random.Random(seed)
    return random.Random()
