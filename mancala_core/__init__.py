"""
Mancala core Python package.

Rule engine and board for two-player Mancala (Kalah and Ayo variants).
Modules:
- board.py: Board, Pit, sowing-ring positions, text rendering
- player.py: Player, Store
- rules.py: GameRules (shared turn engine)
- kalah.py, ayo.py: the two variants; variants.py picks one by name
- cli.py: console driver
"""
