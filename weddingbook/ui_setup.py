# ui_setup.py
"""
Window layout: toolbar, contact list, details panel and status bar
"""

import tkinter as tk
from tkinter import ttk

from weddingbook.constants import COLORS, FONT_FAMILY, LIST_WIDTH
from weddingbook.details_panel import PersonDetailsPanel
from weddingbook.utils import darken_color

READY_MESSAGE = "Ready - Select a contact to see their details"


class UISetup:
    def __init__(self, app):
        self.app = app

    def setup_styles(self):
        """Configure modern ttk styles"""
        style = ttk.Style()

        style.configure(
            "Modern.TFrame",
            background=COLORS['surface']
        )

        style.configure(
            "Modern.TLabel",
            font=(FONT_FAMILY, 10),
            background=COLORS['surface'],
            foreground=COLORS['text_primary']
        )

    def setup_ui(self):
        main_container = ttk.Frame(self.app.root, style="Modern.TFrame")
        main_container.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        # Header section
        header_frame = ttk.Frame(main_container, style="Modern.TFrame")
        header_frame.pack(fill=tk.X, pady=(0, 15))

        title_label = ttk.Label(header_frame, text="Wedding Contacts",
                                font=(FONT_FAMILY, 20, "bold"),
                                foreground=COLORS['primary'],
                                style="Modern.TLabel")
        title_label.pack(side=tk.LEFT)

        toolbar = ttk.Frame(main_container, style="Modern.TFrame")
        toolbar.pack(fill=tk.X, pady=(0, 15))

        self.create_modern_button(toolbar, "📁 Open", self.app.load_data, COLORS['accent'])
        self.create_modern_button(toolbar, "💾 Save", self.app.save_data, COLORS['accent'])
        self.create_modern_button(toolbar, "🖼️ Export PNG", self.app.export_to_png, COLORS['secondary'])

        body = ttk.Frame(main_container, style="Modern.TFrame")
        body.pack(fill=tk.BOTH, expand=True)

        self.setup_contact_list(body)

        self.app.details = PersonDetailsPanel(body)
        self.app.details.pack(side=tk.LEFT, fill=tk.BOTH, expand=True, padx=(10, 0))

        # Status bar
        status_frame = ttk.Frame(main_container, style="Modern.TFrame")
        status_frame.pack(fill=tk.X, pady=(10, 0))

        self.app.status_label = ttk.Label(status_frame,
                                          text=READY_MESSAGE,
                                          font=(FONT_FAMILY, 9),
                                          foreground=COLORS['text_secondary'],
                                          style="Modern.TLabel")
        self.app.status_label.pack(side=tk.LEFT)

        self.app.root.bind("<Key-Escape>", self.app.clear_selection)

    def setup_contact_list(self, parent):
        list_frame = ttk.Frame(parent, style="Modern.TFrame")
        list_frame.pack(side=tk.LEFT, fill=tk.Y)

        scrollbar = ttk.Scrollbar(list_frame, orient=tk.VERTICAL)
        self.app.contact_list = tk.Listbox(list_frame,
                                           width=LIST_WIDTH,
                                           font=(FONT_FAMILY, 11),
                                           bg=COLORS['surface'],
                                           fg=COLORS['text_primary'],
                                           selectbackground=COLORS['primary'],
                                           relief=tk.FLAT,
                                           highlightthickness=1,
                                           highlightbackground=COLORS['border'],
                                           exportselection=False,
                                           yscrollcommand=scrollbar.set)
        scrollbar.configure(command=self.app.contact_list.yview)
        self.app.contact_list.pack(side=tk.LEFT, fill=tk.Y)
        scrollbar.pack(side=tk.LEFT, fill=tk.Y)

        self.app.contact_list.bind("<<ListboxSelect>>", self.app.on_contact_selected)

    def create_modern_button(self, parent, text, command, color):
        """Create a modern styled button"""
        btn = tk.Button(parent,
                        text=text,
                        command=command,
                        font=(FONT_FAMILY, 10, "bold"),
                        bg=color,
                        fg='white',
                        relief=tk.FLAT,
                        padx=20,
                        pady=10,
                        cursor='hand2',
                        border=0)

        def on_enter(e):
            btn.configure(bg=darken_color(color))

        def on_leave(e):
            btn.configure(bg=color)

        btn.bind("<Enter>", on_enter)
        btn.bind("<Leave>", on_leave)
        btn.pack(side=tk.LEFT, padx=(0, 10))
        return btn
