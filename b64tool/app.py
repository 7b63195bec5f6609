"""Desktop window for encoding and decoding base64 text."""

from __future__ import annotations

import argparse
import enum
from typing import Sequence

from b64tool.codec import Base64Error, decode, encode

WINDOW_TITLE = "Base64 Encoder/Decoder"
WINDOW_SIZE = (800, 600)
ABOUT_TEXT = "A simple application that encodes and decodes Base64 strings."
_TRIM_CHARS = " \t\r\n\v\f"


class Mode(enum.Enum):
    """What the Process button does with the input."""

    DECODE = "Decode"
    ENCODE = "Encode"


def process(text: str, mode: Mode | str) -> str:
    """Encode or decode *text* according to *mode*."""
    mode = Mode(mode)
    if mode is Mode.DECODE:
        return decode(text).decode("utf-8", errors="replace")
    return encode(text)


def clipboard_text(result: str) -> str:
    """Return what the Copy button puts on the clipboard.

    This is the part of *result* after its first colon, with surrounding
    whitespace removed; it is empty when *result* holds no colon.
    """
    _, colon, rest = result.partition(":")
    if not colon:
        return ""
    return rest.strip(_TRIM_CHARS)


class MainWindow:
    """The main window: an input box, a mode choice and a result box."""

    def __init__(self, root) -> None:
        import tkinter as tk
        from tkinter import messagebox, ttk

        self._tk = tk
        self._messagebox = messagebox
        self.root = root

        width, height = WINDOW_SIZE
        root.title(WINDOW_TITLE)
        root.geometry(f"{width}x{height}")
        root.minsize(width, height)
        root.maxsize(width, height)
        root.resizable(False, False)

        menubar = tk.Menu(root)
        help_menu = tk.Menu(menubar, tearoff=False)
        help_menu.add_command(label="About", command=self.show_about)
        help_menu.add_command(label="Exit", underline=0, command=self.exit)
        menubar.add_cascade(label="Help", underline=0, menu=help_menu)
        root.config(menu=menubar)

        panel = ttk.Frame(root)
        panel.place(x=0, y=0, relwidth=1, relheight=1)

        self.input_text = tk.Text(panel, wrap="word")
        self.input_text.place(x=20, y=20, width=740, height=80)

        self.mode_var = tk.StringVar(value=Mode.ENCODE.value)
        self.mode_choice = ttk.Combobox(
            panel,
            textvariable=self.mode_var,
            values=[mode.value for mode in Mode],
            state="readonly",
        )
        self.mode_choice.place(x=350, y=113, width=100, height=30)

        ttk.Button(panel, text="Process", command=self.run_process).place(
            x=180, y=110, width=100, height=30
        )
        ttk.Button(panel, text="Copy", command=self.copy_result).place(
            x=520, y=110, width=100, height=30
        )
        ttk.Label(panel, text="Result:").place(x=20, y=140)

        self.result_text = tk.Text(panel, wrap="word", state="disabled")
        self.result_text.place(x=20, y=160, width=740, height=360)

    def _set_result(self, value: str) -> None:
        self.result_text.config(state="normal")
        self.result_text.delete("1.0", "end")
        self.result_text.insert("1.0", value)
        self.result_text.config(state="disabled")

    def run_process(self) -> None:
        """Run the chosen conversion on the input and show the result."""
        text = self.input_text.get("1.0", "end-1c")
        try:
            result = process(text, self.mode_var.get())
        except Base64Error as error:
            self._messagebox.showerror("Error", str(error), parent=self.root)
            return
        self._set_result(result)

    def copy_result(self) -> None:
        """Put the text after the result's first colon on the clipboard."""
        value = clipboard_text(self.result_text.get("1.0", "end-1c"))
        self.root.clipboard_clear()
        self.root.clipboard_append(value)

    def show_about(self) -> None:
        """Show the About box."""
        self._messagebox.showinfo("About", ABOUT_TEXT, parent=self.root)

    def exit(self) -> None:
        """Close the window."""
        self.root.destroy()


def main(argv: Sequence[str] | None = None) -> int:
    """Open the window and run until it is closed."""
    parser = argparse.ArgumentParser(prog="b64tool", description=ABOUT_TEXT)
    parser.parse_args(argv)

    import tkinter as tk

    root = tk.Tk()
    MainWindow(root)
    root.mainloop()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())