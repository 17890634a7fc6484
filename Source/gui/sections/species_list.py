from __future__ import annotations

import tkinter as tk
from tkinter import ttk


def build(parent: tk.Widget, app) -> dict:
    """Build the species list column into `parent`.

    Returns a handle dict with keys:
    - frame: the top-level frame for this section
    - search_var: StringVar bound to the search entry
    - listbox: the Listbox holding the filtered species
    - status_var: StringVar for the loading/failure line
    """
    box = ttk.Frame(parent)
    box.pack(side=tk.LEFT, fill=tk.BOTH, expand=True, padx=6, pady=6)

    header = ttk.Frame(box)
    header.pack(fill=tk.X)
    ttk.Label(header, text=app.title_text, font=("TkDefaultFont", 14, "bold")).pack(side=tk.LEFT)
    ttk.Button(header, text="Refresh", command=app._on_refresh).pack(side=tk.RIGHT)

    search_var = tk.StringVar()
    ttk.Entry(box, textvariable=search_var).pack(fill=tk.X, pady=(6, 0))

    body = ttk.Frame(box)
    body.pack(fill=tk.BOTH, expand=True, pady=6)
    listbox = tk.Listbox(body, exportselection=False)
    listbox.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)
    sb = ttk.Scrollbar(body, orient="vertical", command=listbox.yview)
    listbox.configure(yscrollcommand=sb.set)
    sb.pack(side=tk.RIGHT, fill=tk.Y)
    listbox.bind("<<ListboxSelect>>", app._on_species_select)

    status_var = tk.StringVar()
    ttk.Label(box, textvariable=status_var, foreground="grey").pack(anchor=tk.W)

    return {"frame": box, "search_var": search_var, "listbox": listbox, "status_var": status_var}
