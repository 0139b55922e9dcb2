"""Factory for players with the standard pawn set."""

from .pawn import Hero, Scout
from .player import Player
from ...constants import HEROES_PER_PLAYER, SCOUTS_PER_PLAYER


class PlayerFactory:
    """Creates players equipped with scouts and heroes."""
    
    @staticmethod
    def create_player(name: str, scouts: int = SCOUTS_PER_PLAYER,
                      heroes: int = HEROES_PER_PLAYER) -> Player:
        pawns = [Scout() for _ in range(scouts)] + [Hero() for _ in range(heroes)]
        return Player(name=name, pawns=pawns)
    
    @staticmethod
    def create_standard_player(name: str) -> Player:
        """Three archaeologists and Theseus."""
        return PlayerFactory.create_player(name)
