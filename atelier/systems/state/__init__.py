from atelier.systems.state.game_manager import GameManager

__all__ = ['GameManager']
