import tkinter as tk
from tkinter import font

import config
import game
from keyboard import LetterHint
from state import Outcome
from wordHandle import Classification


# --- Configuration & Colors ---
COLOR_BG_MAIN = "#E3C08D"
COLOR_BTN_NEW_BG = "#E7AB56"
COLOR_BTN_NEW_FG = "#FFFFFF"
COLOR_BOX_EMPTY_BG = "#FCE8CC"
COLOR_BOX_EMPTY_FG = "#605C56"
COLOR_BOX_PENDING_BORDER = "#605C56"
COLOR_BOX_ABSENT = "#605C56"
COLOR_BOX_PRESENT = "#E8E53F"
COLOR_BOX_CORRECT = "#5A9C36"
COLOR_KEY_DISABLED_FG = "#B8B2A8"

CELL_COLORS = {
    Classification.EXACT: COLOR_BOX_CORRECT,
    Classification.PRESENT: COLOR_BOX_PRESENT,
    Classification.ABSENT: COLOR_BOX_ABSENT,
}

HINT_COLORS = {
    LetterHint.EXACT: COLOR_BOX_CORRECT,
    LetterHint.PRESENT: COLOR_BOX_PRESENT,
    LetterHint.ABSENT: COLOR_BOX_ABSENT,
}


class WordleUI:
    def __init__(self, root, provider=None, secret=None):
        self.root = root
        self.root.title("Wordle")
        self.root.geometry("700x720")
        self.root.configure(bg=COLOR_BG_MAIN)
        self.root.resizable(False, False)

        # Initialize Game Backend
        self.game = game.Game(secret=secret, provider=provider)

        # Setup Fonts
        self.font_key = font.Font(family="Helvetica", size=12, weight="bold")
        self.font_box = font.Font(family="Helvetica", size=24, weight="bold")
        self.font_btn = font.Font(family="Helvetica", size=14, weight="bold")

        # Main Canvas
        self.canvas = tk.Canvas(
            root, width=700, height=720,
            bg=COLOR_BG_MAIN, highlightthickness=0
        )
        self.canvas.pack(fill="both", expand=True)

        # Bind Inputs
        self.root.bind("<Key>", self.handle_keypress)
        self.canvas.bind("<Button-1>", self.handle_click)

        # Initial Draw
        self.UI_update()

    def draw_rounded_rect(self, x1, y1, x2, y2, radius, **kwargs):
        points = [
            x1 + radius, y1,
            x2 - radius, y1,
            x2, y1,
            x2, y1 + radius,
            x2, y2 - radius,
            x2, y2,
            x2 - radius, y2,
            x1 + radius, y2,
            x1, y2,
            x1, y2 - radius,
            x1, y1 + radius,
            x1, y1
        ]
        return self.canvas.create_polygon(points, **kwargs, smooth=True)

    def draw_button(self, x, y, w, h, text, bg, fg, tag, radius=25):
        self.draw_rounded_rect(x, y, x + w, y + h, radius, fill=bg, tags=tag)
        self.canvas.create_text(x + w/2, y + h/2, text=text, fill=fg, font=self.font_btn, tags=tag)

    def draw_key(self, x, y, w, h, text, bg, fg, tag, enabled):
        # Disabled keys get no tag, so clicks on them go nowhere
        tag = tag if enabled else ""
        fg = fg if enabled else COLOR_KEY_DISABLED_FG
        self.draw_rounded_rect(x, y, x + w, y + h, 10, fill=bg, tags=tag)
        self.canvas.create_text(x + w/2, y + h/2, text=text, fill=fg, font=self.font_key, tags=tag)

    def UI_update(self):
        self.canvas.delete("all")
        data = self.game.snapshot()

        # 1. New Game Button
        self.draw_button(20, 20, 140, 50, "New game", COLOR_BTN_NEW_BG, COLOR_BTN_NEW_FG, "btn_new_game")

        # 2. Draw Game Grid
        box_size = 65
        gap = 10
        start_x = 350 - (config.WORD_LENGTH * (box_size + gap) - gap) / 2
        start_y = 90

        for row in range(config.MAX_ROWS):
            word = data.rows[row]
            for col in range(config.WORD_LENGTH):
                bx = start_x + col * (box_size + gap)
                by = start_y + row * (box_size + gap)
                cell = data.cells[row][col]

                bg_color = CELL_COLORS.get(cell, COLOR_BOX_EMPTY_BG)
                text_color = "#FFFFFF" if cell in CELL_COLORS else COLOR_BOX_EMPTY_FG
                outline = COLOR_BOX_PENDING_BORDER if cell == Classification.PENDING else ""

                self.draw_rounded_rect(bx, by, bx+box_size, by+box_size, 25, fill=bg_color, outline=outline, width=2)

                char = word[col] if col < len(word) else ""
                self.canvas.create_text(bx + box_size/2, by + box_size/2, text=char.upper(), fill=text_color, font=self.font_box)

        # 3. Draw Keyboard
        kb_start_y = 550
        key_w = 40
        key_h = 45
        key_gap = 5

        for i, row_keys in enumerate(config.KEYBOARD_LAYOUT):
            row_w = len(row_keys) * (key_w + key_gap)
            start_x_kb = 350 - (row_w / 2)

            for j, char in enumerate(row_keys):
                kx = start_x_kb + j * (key_w + key_gap)
                ky = kb_start_y + i * (key_h + key_gap)

                hint = data.keyboard[char]
                k_bg = HINT_COLORS.get(hint, COLOR_BOX_EMPTY_BG)
                k_fg = "#FFFFFF" if hint in HINT_COLORS else COLOR_BOX_EMPTY_FG
                self.draw_key(kx, ky, key_w, key_h, char.upper(), k_bg, k_fg, f"key_{char}", data.gates.can_type)

        # Special Keys
        last_row = len(config.KEYBOARD_LAYOUT) - 1
        enter_x = 350 + (len(config.KEYBOARD_LAYOUT[last_row]) * (key_w + key_gap))/2 + 10
        enter_y = kb_start_y + last_row * (key_h + key_gap)
        self.draw_key(enter_x, enter_y, 70, key_h, "Enter", COLOR_BOX_EMPTY_BG, COLOR_BOX_EMPTY_FG,
                      "key_enter", data.gates.can_submit)

        back_x = 350 - (len(config.KEYBOARD_LAYOUT[last_row]) * (key_w + key_gap))/2 - 60
        self.draw_key(back_x, enter_y, 50, key_h, "⌫", COLOR_BOX_EMPTY_BG, COLOR_BOX_EMPTY_FG,
                      "key_back", data.gates.can_delete)

        # 4. Win/Loss Overlay
        if data.is_over:
            self.draw_game_over(data)

    def draw_game_over(self, data):
        is_win = data.outcome is Outcome.WIN
        msg = "YOU WIN" if is_win else "YOU LOSE"
        word_msg = "The correct word was " + data.answer.upper()
        color = COLOR_BTN_NEW_BG if is_win else COLOR_BOX_ABSENT

        self.canvas.create_rectangle(0, 0, 700, 720, fill="#FFFFFF", stipple="gray50")

        cx, cy = 350, 360
        self.canvas.create_text(cx, cy - 30, text=msg, fill=color, font=("Helvetica", 40, "bold"))
        if not is_win:
            self.canvas.create_text(cx, cy + 15, text=word_msg, fill=color, font=("Helvetica", 20, "bold"))
        self.draw_button(cx - 70, cy + 40, 140, 50, "New game", COLOR_BTN_NEW_BG, COLOR_BTN_NEW_FG, "btn_new_game_over")

    # --- Interaction Handlers ---

    def handle_keypress(self, event):
        # Gating is checked again inside the game, so stray keys are harmless
        self.game.press(event.keysym)
        self.UI_update()

    def handle_click(self, event):
        items = self.canvas.find_closest(event.x, event.y)
        if not items:
            return
        tags = self.canvas.gettags(items[0])

        if not tags: return
        tag = tags[0]

        if tag in ("btn_new_game", "btn_new_game_over"):
            self.game.new_game()
            self.UI_update()
            return

        if tag.startswith("key_"):
            val = tag.split("_")[1]
            if val == "back":
                val = "backspace"
            self.game.press(val)
            self.UI_update()


def start(provider=None, secret=None):
    root = tk.Tk()
    app = WordleUI(root, provider=provider, secret=secret)
    root.mainloop()
    return app


if __name__ == "__main__":
    start()
