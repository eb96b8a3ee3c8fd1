"""
Controller module for hotseat TicTacToe.
Translates player input into engine moves.
"""

from .config import ControllerConfig, DisplayConfig
from .input_controller import InputController
