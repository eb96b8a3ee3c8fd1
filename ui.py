"""
TicTacToe UI
A graphical interface for two players sharing one device, using Tkinter.

Shows:
- The 3x3 board (click a cell, or use the arrow keys and Enter/Space)
- Game status and the latest announcement
- A Restart button that starts a new game at any time
"""

import logging
import tkinter as tk
from tkinter import ttk
from typing import Optional

from engine import GameState, Mark, Won
from controller import InputController, ControllerConfig, DisplayConfig

logger = logging.getLogger(__name__)


class TicTacToeUI:
    """
    Main UI class. Purely a display surface: every state change comes
    from the InputController through render().
    """

    def __init__(
        self,
        display_config: Optional[DisplayConfig] = None,
        controller_config: Optional[ControllerConfig] = None
    ):
        """Initialize the UI."""
        self.config = display_config or DisplayConfig()
        self.focused_index = 0

        self._create_ui()

        self.controller = InputController(
            render=self.render,
            announce=self.announce,
            focus=self.set_focus,
            status=self.set_status,
            config=controller_config,
        )

    def _create_ui(self):
        """Create the Tkinter UI."""
        cfg = self.config

        self.root = tk.Tk()
        self.root.title(cfg.WINDOW_TITLE)
        self.root.configure(bg=cfg.BACKGROUND)
        self.root.resizable(False, False)

        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background=cfg.BACKGROUND)
        style.configure('Status.TLabel', background=cfg.BACKGROUND,
                        foreground=cfg.STATUS_FOREGROUND, font=cfg.STATUS_FONT)
        style.configure('Announce.TLabel', background=cfg.BACKGROUND,
                        foreground=cfg.ANNOUNCE_FOREGROUND, font=cfg.ANNOUNCE_FONT)

        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=20, pady=20)

        self.status_label = ttk.Label(main_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=(0, 10))

        # Board grid
        board_frame = ttk.Frame(main_frame)
        board_frame.pack()

        self.cells = []
        for index in range(9):
            row, col = divmod(index, 3)
            cell = tk.Button(
                board_frame,
                text="",
                font=cfg.CELL_FONT,
                width=cfg.CELL_WIDTH,
                height=cfg.CELL_HEIGHT,
                bg=cfg.CELL_BACKGROUND,
                fg=cfg.CELL_FOREGROUND,
                relief='ridge',
                borderwidth=2,
                highlightthickness=3,
                highlightbackground=cfg.BACKGROUND,
                takefocus=0,
                command=lambda i=index: self.controller.click(i)
            )
            cell.grid(row=row, column=col, padx=2, pady=2)
            self.cells.append(cell)

        # Announcements (what a screen reader would hear)
        self.announce_label = ttk.Label(main_frame, text="", style='Announce.TLabel')
        self.announce_label.pack(pady=(10, 0))

        tk.Button(
            main_frame,
            text="🔄 Restart",
            font=cfg.BUTTON_FONT,
            bg=cfg.RESTART_BACKGROUND,
            fg='white',
            width=14,
            takefocus=0,
            command=lambda: self.controller.restart()
        ).pack(pady=(15, 0))

        # Keys are handled at window level so arrows work wherever Tk focus is
        self.root.bind('<KeyPress>', self._on_key)
        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _on_key(self, event):
        if self.controller.handle_key(event.keysym):
            return "break"
        return None

    # ==================== CALLBACKS ====================

    def render(self, state: GameState):
        """Draw the board from a game state. Safe to call repeatedly."""
        cfg = self.config
        winning_line = state.status.line if isinstance(state.status, Won) else None

        for index, cell in enumerate(self.cells):
            mark = state.board[index]
            if mark is None:
                text, fg = "", cfg.CELL_FOREGROUND
            else:
                text = mark.value
                fg = cfg.X_FOREGROUND if mark == Mark.X else cfg.O_FOREGROUND

            bg = cfg.WIN_BACKGROUND if winning_line and index in winning_line else cfg.CELL_BACKGROUND
            disabled = state.is_over or mark is not None

            cell.configure(
                text=text,
                bg=bg,
                fg=fg,
                disabledforeground=fg,
                state='disabled' if disabled else 'normal'
            )

        self._draw_focus()

    def announce(self, message: str):
        logger.debug("Announce: %s", message)
        self.announce_label.configure(text=message)

    def set_status(self, text: str):
        self.status_label.configure(text=text)

    def set_focus(self, index: int):
        self.focused_index = index
        self._draw_focus()

    def _draw_focus(self):
        for index, cell in enumerate(self.cells):
            colour = self.config.FOCUS_BORDER if index == self.focused_index else self.config.BACKGROUND
            cell.configure(highlightbackground=colour, highlightcolor=colour)

    def _quit(self):
        """Quit the application."""
        logger.info("Quitting")
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Start a game and run the UI main loop."""
        self.controller.start()
        self.root.mainloop()
