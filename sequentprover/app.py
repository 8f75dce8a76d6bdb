import logging
import tkinter as tk
from tkinter import ttk

from .config import (
    APP_TITLE,
    COPIED_MESSAGE,
    DEFAULT_SEQUENT,
    EMPTY_INPUT_MESSAGE,
    EXPORT_GEOMETRY,
    EXPORT_TITLE,
    HEADER_FONT,
    MAIN_FONT,
    MONO_FONT,
    STATUS_FONT,
    UNPROVABLE_MESSAGE,
    WINDOW_GEOMETRY,
)
from .errors import SequentParseError
from .parser import parse
from .proof import prove

logger = logging.getLogger(__name__)


class ProverApp:
    def __init__(self, root):
        self.root = root
        self.root.title(APP_TITLE)
        self.root.geometry(WINDOW_GEOMETRY)

        self.style = ttk.Style()
        if "clam" in self.style.theme_names():
            self.style.theme_use("clam")
        self.style.configure("TButton", font=MAIN_FONT, padding=5)
        self.style.configure("TLabel", font=MAIN_FONT)

        # Result of the last successful parse, None until then
        self.proof = None

        self._setup_ui()

    def _setup_ui(self):
        main_container = ttk.Frame(self.root, padding="15")
        main_container.pack(fill=tk.BOTH, expand=True)

        # --- SECTION: Header & Input ---
        header_frame = ttk.Frame(main_container)
        header_frame.pack(fill=tk.X, pady=(0, 15))

        ttk.Label(header_frame, text="Enter Sequent:", font=HEADER_FONT).pack(side=tk.LEFT)

        self.input_var = tk.StringVar(value=DEFAULT_SEQUENT)
        self.entry = ttk.Entry(header_frame, textvariable=self.input_var, font=MONO_FONT)
        self.entry.pack(side=tk.LEFT, fill=tk.X, expand=True, padx=10)
        self.entry.bind("<Return>", lambda e: self.prove_input())

        ttk.Button(header_frame, text="Prove", command=self.prove_input).pack(side=tk.LEFT, padx=5)
        ttk.Button(header_frame, text="Clear", command=self.clear).pack(side=tk.LEFT, padx=5)
        ttk.Button(header_frame, text="Export LaTeX", command=self.export_latex).pack(side=tk.RIGHT)

        # --- SECTION: Proof figure ---
        figure_frame = ttk.LabelFrame(main_container, text=" Proof Figure ", padding=10)
        figure_frame.pack(fill=tk.BOTH, expand=True)

        y_scroll = ttk.Scrollbar(figure_frame)
        y_scroll.pack(side=tk.RIGHT, fill=tk.Y)
        x_scroll = ttk.Scrollbar(figure_frame, orient=tk.HORIZONTAL)
        x_scroll.pack(side=tk.BOTTOM, fill=tk.X)

        self.figure_text = tk.Text(
            figure_frame,
            font=MONO_FONT,
            wrap=tk.NONE,
            state=tk.DISABLED,
            yscrollcommand=y_scroll.set,
            xscrollcommand=x_scroll.set,
        )
        self.figure_text.pack(fill=tk.BOTH, expand=True)
        y_scroll.config(command=self.figure_text.yview)
        x_scroll.config(command=self.figure_text.xview)

        # Status Bar
        self.status_var = tk.StringVar(value="Ready. Enter a sequent and press Prove.")
        status_bar = ttk.Label(
            self.root,
            textvariable=self.status_var,
            relief=tk.SUNKEN,
            anchor=tk.W,
            font=STATUS_FONT,
        )
        status_bar.pack(side=tk.BOTTOM, fill=tk.X)

    def prove_input(self):
        self.hide_figure()
        self.proof = None
        text = self.input_var.get()
        if not text.strip():
            self.show_error(EMPTY_INPUT_MESSAGE)
            return None

        try:
            sequent = parse(text)
        except SequentParseError as e:
            logger.debug("parse failed for %r: %s", text, e)
            self.show_error(str(e), e.position)
            return None

        self.proof = prove(sequent)
        if self.proof.provable:
            self.show_figure(self.proof.figure)
            self.status_var.set(f"Provable: {sequent}")
        else:
            self.show_error(UNPROVABLE_MESSAGE)
        return self.proof

    def show_figure(self, figure):
        self.figure_text.config(state=tk.NORMAL)
        self.figure_text.delete("1.0", tk.END)
        self.figure_text.insert(tk.END, str(figure))
        self.figure_text.config(state=tk.DISABLED)

    def hide_figure(self):
        self.figure_text.config(state=tk.NORMAL)
        self.figure_text.delete("1.0", tk.END)
        self.figure_text.config(state=tk.DISABLED)

    def show_error(self, message, position=None):
        self.status_var.set(message)
        if position is not None:
            # Highlight the offending character (or the end of the input).
            self.entry.focus_set()
            self.entry.selection_range(position, position + 1)
            self.entry.icursor(position)

    def clear(self):
        self.hide_figure()
        self.proof = None
        self.input_var.set("")
        self.entry.selection_clear()
        self.status_var.set("Ready. Enter a sequent and press Prove.")

    def export_latex(self):
        if self.proof is None or not self.proof.provable:
            self.status_var.set("Nothing to export. Prove a sequent first.")
            return None

        latex_code = self.proof.figure.to_latex()
        self._show_latex_dialog(latex_code)
        return latex_code

    def _show_latex_dialog(self, latex_code):
        dialog = tk.Toplevel(self.root)
        dialog.title(EXPORT_TITLE)
        dialog.geometry(EXPORT_GEOMETRY)

        buttons = ttk.Frame(dialog, padding=10)
        buttons.pack(side=tk.BOTTOM, fill=tk.X)
        ttk.Button(buttons, text="Copy to Clipboard", command=lambda: self.copy_latex(latex_code)).pack(side=tk.RIGHT)
        ttk.Button(buttons, text="Close", command=dialog.destroy).pack(side=tk.RIGHT, padx=5)

        code = tk.Text(dialog, font=MONO_FONT, wrap=tk.NONE)
        code.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)
        code.insert(tk.END, latex_code)

    def copy_latex(self, latex_code):
        self.root.clipboard_clear()
        self.root.clipboard_append(latex_code)
        self.root.update()  # Keeps the clipboard after the dialog closes
        self.status_var.set(COPIED_MESSAGE)


def main():
    root = tk.Tk()
    ProverApp(root)
    root.mainloop()


if __name__ == "__main__":
    main()
