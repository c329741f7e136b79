from hex_light.mcts.mcts import MonteCarloPlayer, Node
from hex_light.mcts.enhanced_mcts import EnhancedMonteCarloPlayer, AMAFNode
from hex_light.mcts.opening_book import opening_move

__all__ = [
    'MonteCarloPlayer',
    'Node',
    'EnhancedMonteCarloPlayer',
    'AMAFNode',
    'opening_move',
]
