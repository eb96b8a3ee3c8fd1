"""
Configuration for the hotseat TicTacToe controller and window.
Key bindings, announcement text, and display settings.
"""


class ControllerConfig:
    """
    Key bindings and message templates for the input controller.
    Override any attribute with a keyword argument.
    """

    # ==================== KEY BINDINGS ====================
    # Tk keysyms for each focus direction
    KEYS_UP = ("Up", "KP_Up")
    KEYS_DOWN = ("Down", "KP_Down")
    KEYS_LEFT = ("Left", "KP_Left")
    KEYS_RIGHT = ("Right", "KP_Right")

    # Keys that place the current mark on the focused cell
    KEYS_PLACE = ("Return", "KP_Enter", "space")

    # ==================== MESSAGES ====================
    MSG_TURN = "Turn: {mark}"
    MSG_WIN = "{mark} wins!"
    MSG_DRAW = "Draw!"
    MSG_MOVE_PLACED = "Move placed. Turn: {mark}"
    MSG_NEW_GAME = "New game started. Turn: {mark}"
    MSG_CELL_TAKEN = "That cell is already taken."
    MSG_INVALID_CELL = "That cell does not exist."
    MSG_GAME_OVER = "Game over. Press Restart / New Game to play again."

    def __init__(self, **overrides):
        for name, value in overrides.items():
            if not hasattr(self, name):
                raise AttributeError(f"Unknown config option: {name}")
            setattr(self, name, value)


class DisplayConfig:
    """
    Settings for the Tkinter window.
    """

    WINDOW_TITLE = "TicTacToe"

    # ==================== COLOURS ====================
    BACKGROUND = "#1a1a2e"
    CELL_BACKGROUND = "#16213e"
    CELL_FOREGROUND = "white"
    X_FOREGROUND = "#f87171"
    O_FOREGROUND = "#10b981"
    WIN_BACKGROUND = "#065f46"
    FOCUS_BORDER = "#00d4ff"
    STATUS_FOREGROUND = "#ffd700"
    ANNOUNCE_FOREGROUND = "#a0aec0"
    RESTART_BACKGROUND = "#6366f1"

    # ==================== FONTS ====================
    CELL_FONT = ("Segoe UI", 28, "bold")
    STATUS_FONT = ("Segoe UI", 14, "bold")
    ANNOUNCE_FONT = ("Segoe UI", 10)
    BUTTON_FONT = ("Segoe UI", 11, "bold")

    # Cell size in text units (Tk label width/height)
    CELL_WIDTH = 4
    CELL_HEIGHT = 2

    def __init__(self, **overrides):
        for name, value in overrides.items():
            if not hasattr(self, name):
                raise AttributeError(f"Unknown config option: {name}")
            setattr(self, name, value)
