"""
Procedural generation of the club world and new players.
"""
from .generate import generate_world_teams, create_player

__all__ = ["generate_world_teams", "create_player"]
