from dataclasses import dataclass


@dataclass
class Gem:
    name: str = ""
    url: str = ""
    version: str = ""
    description: str = ""
    position: int = 0


def by_position(gem):
    return gem.position
