"""
TicTacToe UI
A graphical interface for TicTacToe using Tkinter.

Shows:
- The board (click a cell to play)
- Game status and whose turn it is
- Move list with time travel (click a move to go back to it)
- Sort toggle for the move list
"""

import tkinter as tk
from tkinter import ttk, filedialog
from PIL import Image, ImageTk
from typing import Optional

# Logic imports
from logic.game_session import GameSession

# Render imports
from render.config import DisplayConfig
from render.board_renderer import BoardRenderer


class TicTacToeUI:
    """
    Main UI class for TicTacToe.

    Every refresh redraws from the session's current state; the UI keeps
    no game state of its own.
    """

    def __init__(self, config: Optional[DisplayConfig] = None, debug: bool = False):
        """Initialize the UI."""
        self.config = config or DisplayConfig()
        self.debug = debug or self.config.DEBUG_MODE

        self.session = GameSession(debug=self.debug)
        self.renderer = BoardRenderer(self.config)

        # Where the board image sits on the canvas: (x, y, scale)
        self._board_view = (0, 0, 1.0)

        # Create UI
        self._create_ui()
        self._refresh()

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title(self.config.WINDOW_TITLE)
        self.root.configure(bg=self.config.UI_BACKGROUND)

        # Make window resizable
        self.root.geometry(self.config.WINDOW_GEOMETRY)
        self.root.minsize(*self.config.WINDOW_MIN_SIZE)

        # Main container
        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background=self.config.UI_BACKGROUND)
        style.configure('TLabel', background=self.config.UI_BACKGROUND, foreground='white',
                        font=self.config.UI_FONT)
        style.configure('Title.TLabel', font=self.config.UI_TITLE_FONT, foreground=self.config.UI_ACCENT)
        style.configure('Status.TLabel', font=(self.config.UI_FONT[0], 13, 'bold'),
                        foreground=self.config.UI_STATUS)
        style.configure('Current.TLabel', font=(self.config.UI_FONT[0], 11, 'bold'),
                        foreground=self.config.UI_CURRENT)
        style.configure('TButton', font=(self.config.UI_FONT[0], 10, 'bold'))

        # Left panel - Board
        left_frame = ttk.Frame(main_frame)
        left_frame.pack(side=tk.LEFT, fill=tk.BOTH, expand=True, padx=(0, 10))

        self.status_label = ttk.Label(left_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=(0, 5))

        self.board_canvas = tk.Canvas(left_frame, bg=self.config.UI_PANEL, highlightthickness=2,
                                      highlightbackground=self.config.UI_ACCENT)
        self.board_canvas.pack(fill=tk.BOTH, expand=True)
        self.board_canvas.bind("<Button-1>", self._on_canvas_click)
        self.board_canvas.bind("<Configure>", lambda event: self._update_board_canvas())

        # Right panel - Moves
        right_frame = ttk.Frame(main_frame, width=320)
        right_frame.pack(side=tk.RIGHT, fill=tk.Y, padx=(10, 0))
        right_frame.pack_propagate(False)

        ttk.Label(right_frame, text="Moves", style='Title.TLabel').pack(pady=(0, 10))

        self.sort_btn = tk.Button(
            right_frame,
            text="",
            font=(self.config.UI_FONT[0], 10, 'bold'),
            bg='#6366f1',
            fg='white',
            width=20,
            command=self._toggle_sort
        )
        self.sort_btn.pack(pady=5)

        self.moves_frame = ttk.Frame(right_frame)
        self.moves_frame.pack(fill=tk.BOTH, expand=True, pady=10)

        # Control buttons
        ttk.Separator(right_frame, orient='horizontal').pack(fill=tk.X, pady=10)

        control_frame = ttk.Frame(right_frame)
        control_frame.pack(pady=5)

        tk.Button(
            control_frame,
            text="Reset",
            font=(self.config.UI_FONT[0], 10, 'bold'),
            bg='#10b981',
            fg='white',
            width=10,
            command=self._reset_game
        ).pack(side=tk.LEFT, padx=5)

        tk.Button(
            control_frame,
            text="Save image",
            font=(self.config.UI_FONT[0], 10, 'bold'),
            bg='#2d3748',
            fg='white',
            width=10,
            command=self._save_image
        ).pack(side=tk.LEFT, padx=5)

        # Quit button
        tk.Button(
            right_frame,
            text="Quit",
            font=(self.config.UI_FONT[0], 10),
            bg='#ef4444',
            fg='white',
            width=22,
            command=self._quit
        ).pack(pady=10)

        # Bind close event
        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    # ==================== DRAWING ====================

    def _refresh(self):
        """Redraw everything from the session."""
        self.status_label.configure(text=self.session.status())
        self.sort_btn.configure(text=self.session.sort_label())
        self._update_move_list()
        self._update_board_canvas()

    def _update_board_canvas(self):
        """Draw the current board onto the canvas."""
        canvas_width = self.board_canvas.winfo_width()
        canvas_height = self.board_canvas.winfo_height()

        if canvas_width < 10 or canvas_height < 10:
            return

        image = self.renderer.render(self.session.current_board, self.session.winning_cells())

        # Resize to fit canvas while keeping it square
        board_size = image.shape[0]
        scale = min(canvas_width, canvas_height) / board_size
        new_size = max(1, int(board_size * scale))

        pil_image = Image.fromarray(self.renderer.to_rgb(image)).resize((new_size, new_size))
        photo = ImageTk.PhotoImage(pil_image)

        self.board_canvas.delete("all")
        x = (canvas_width - new_size) // 2
        y = (canvas_height - new_size) // 2
        self.board_canvas.create_image(x, y, anchor=tk.NW, image=photo)
        self.board_canvas.image = photo  # Keep reference
        self._board_view = (x, y, scale)

    def _update_move_list(self):
        """Rebuild the move list."""
        for child in self.moves_frame.winfo_children():
            child.destroy()

        for entry in self.session.move_list():
            if entry.is_current:
                ttk.Label(self.moves_frame, text=entry.label, style='Current.TLabel').pack(anchor=tk.W, pady=2)
            else:
                tk.Button(
                    self.moves_frame,
                    text=entry.label,
                    font=self.config.UI_FONT,
                    bg=self.config.UI_PANEL,
                    fg='white',
                    anchor=tk.W,
                    command=lambda move=entry.move: self._jump_to(move)
                ).pack(fill=tk.X, pady=2)

    # ==================== EVENTS ====================

    def _on_canvas_click(self, event):
        """Map a canvas click to a board cell."""
        x, y, scale = self._board_view
        board_x = (event.x - x) / scale
        board_y = (event.y - y) / scale

        size = self.config.BOARD_OUTPUT_SIZE
        if not (0 <= board_x < size and 0 <= board_y < size):
            return

        self._play(self.renderer.cell_at(board_x, board_y))

    def _play(self, index: int):
        """Play a cell and redraw."""
        if self.session.play_move(index):
            self._refresh()

    def _jump_to(self, move: int):
        """Go to a move in history."""
        if self.session.jump_to(move):
            self._refresh()

    def _toggle_sort(self):
        """Flip the move list order."""
        self.session.toggle_sort_order()
        self._refresh()

    def _reset_game(self):
        """Reset the game."""
        print("Resetting game...")
        self.session = GameSession(debug=self.debug)
        self._refresh()

    def _save_image(self, path: Optional[str] = None) -> bool:
        """Save the current board as an image."""
        if path is None:
            path = filedialog.asksaveasfilename(
                parent=self.root,
                defaultextension=".png",
                filetypes=[("PNG image", "*.png")]
            )
        if not path:
            return False

        saved = self.renderer.save(self.session.current_board, path, self.session.winning_cells())
        print(f"Saved: {path}" if saved else f"ERROR: Could not save {path}")
        return saved

    def _quit(self):
        """Quit the application."""
        print("Quitting...")
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()

