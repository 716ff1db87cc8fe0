# details_panel.py
"""
tkinter panel showing the details of the selected contact
"""

import tkinter as tk
from tkinter import ttk

from weddingbook.constants import COLORS, NAME_FONT, DETAIL_FONT
from weddingbook.details_view import DetailsView, DISPLAY_FIELDS, NAME, LINKED_PERSONS_LINE


class PersonDetailsPanel(tk.Frame):
    """
    One label per display field, stacked with grid.

    Hidden labels are removed with grid_remove() so they free their row, and
    come back in place with grid() since grid remembers their options.
    """
    def __init__(self, parent, person=None, **kwargs):
        super().__init__(parent, bg=COLORS['surface'], **kwargs)
        self.columnconfigure(0, weight=1)
        self.labels = {}

        for row, field in enumerate(DISPLAY_FIELDS):
            label = ttk.Label(self,
                              text="",
                              font=NAME_FONT if field == NAME else DETAIL_FONT,
                              foreground=COLORS['primary'] if field == NAME else COLORS['text_primary'],
                              background=COLORS['surface'],
                              anchor="w",
                              justify=tk.LEFT)
            label.grid(row=row, column=0, sticky="ew", padx=20,
                       pady=(20, 12) if field == NAME else (2, 2))
            self.labels[field] = label

        self.labels[LINKED_PERSONS_LINE].grid_configure(pady=(12, 2))
        self.view = DetailsView(self)
        self.render(person)

    @property
    def states(self):
        """FieldStates mirror of what the labels show"""
        return self.view.states

    def set_text(self, field, text):
        self.labels[field].configure(text=text)

    def set_visible(self, field, visible):
        if visible:
            self.labels[field].grid()
        else:
            self.labels[field].grid_remove()

    def render(self, person):
        self.view.render(person)
