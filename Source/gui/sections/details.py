from __future__ import annotations

import tkinter as tk
from tkinter import ttk


def build(parent: tk.Widget, app) -> dict:
    """Build the selected-species column into `parent`.

    Each pokemon is a top-level row (sprite reference in the value column)
    with its base stats as child rows.
    """
    box = ttk.Frame(parent)
    box.pack(side=tk.LEFT, fill=tk.BOTH, expand=True, padx=6, pady=6)

    heading_var = tk.StringVar()
    ttk.Label(box, textvariable=heading_var, font=("TkDefaultFont", 14, "bold")).pack(anchor=tk.W)

    body = ttk.Frame(box)
    body.pack(fill=tk.BOTH, expand=True, pady=6)
    tree = ttk.Treeview(body, columns=("value",), show="tree headings")
    tree.heading("#0", text="Stat")
    tree.heading("value", text="Value")
    tree.column("#0", width=180, anchor=tk.W)
    tree.column("value", width=220, anchor=tk.W)
    tree.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)
    sb = ttk.Scrollbar(body, orient="vertical", command=tree.yview)
    tree.configure(yscrollcommand=sb.set)
    sb.pack(side=tk.RIGHT, fill=tk.Y)
    tree.tag_configure("pokemon", font=("TkDefaultFont", 10, "bold"))
    tree.tag_configure("missing", foreground="grey")

    return {"frame": box, "heading_var": heading_var, "tree": tree}
