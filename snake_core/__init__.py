"""
Snake core Python package.

This package contains the pure game-state transition engine and the thin
driver helpers that front-ends call on every tick or key press.
Modules:
- position.py: Position, Direction
- state.py: GameState, Result, MoveOutcome
- food.py: food placement
- moves.py: initial state, direction checks, per-tick movement
- driver.py: reducer-style transitions used by the app and the CLI
"""
