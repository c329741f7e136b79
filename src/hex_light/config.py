"""
Configuration file for Hex Light
"""

import math

# Board Configuration
BOARD_CONFIG = {
    # Side length of the square board
    'board_size': 8,
}

# Alpha-Beta Configuration
ALPHABETA_CONFIG = {
    # Plies searched before the two-distance heuristic is applied
    'search_depth': 2,

    # Print the chosen move and node count
    'verbose': False,
}

# MCTS Configuration
MCTS_CONFIG = {
    # Wall-clock budget per move (checked between iterations)
    'time_limit_ms': 3000,

    # Optional hard cap on iterations (None = time budget only)
    'max_iterations': None,

    # UCB1 exploration constant
    'C': 1 / math.sqrt(2),

    # Rollout RNG seed (None = fresh entropy)
    'seed': None,

    'verbose': False,
}

# Enhanced MCTS Configuration (UCT + AMAF + opening book)
ENHANCED_MCTS_CONFIG = {
    **MCTS_CONFIG,

    # Play the fixed opening reply when this color has no stones yet
    'use_opening_book': True,
}
