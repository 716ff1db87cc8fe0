# data_management.py
"""
File dialog driven open, save and export actions
"""

import os
import logging
from tkinter import messagebox, filedialog

from weddingbook.details_view import Selected
from weddingbook.export import export_details_png
from weddingbook.storage import load_address_book, save_address_book

logger = logging.getLogger(__name__)

FILETYPES = [("WeddingBook files", "*.json"), ("All files", "*.*")]


class DataManagement:
    def __init__(self, app):
        self.app = app

    def load_data(self):
        """Ask for an address book file and show its contacts"""
        filename = filedialog.askopenfilename(filetypes=FILETYPES)
        if not filename:
            return
        self.load_file(filename)

    def load_file(self, filename):
        try:
            book = load_address_book(filename)
        except Exception as e:
            logger.error(f"Error loading data: {e}")
            messagebox.showerror("Error", f"Failed to load contacts: {str(e)}")
            return False

        self.app.set_address_book(book)
        self.app.update_status(f"📁 Loaded {len(book)} contacts from {os.path.basename(filename)}")
        return True

    def save_data(self):
        filename = filedialog.asksaveasfilename(defaultextension=".json", filetypes=FILETYPES)
        if not filename:
            return

        try:
            save_address_book(self.app.book, filename)
        except Exception as e:
            logger.error(f"Error saving data: {e}")
            messagebox.showerror("Error", f"Failed to save contacts: {str(e)}")
            return

        self.app.update_status(f"💾 Saved {len(self.app.book)} contacts to {os.path.basename(filename)}")

    def export_to_png(self):
        """Export the details card of the selected contact to PNG"""
        if not isinstance(self.app.details.view.selection, Selected):
            messagebox.showwarning("Warning", "No contact selected. Please select a contact first.")
            return

        filename = filedialog.asksaveasfilename(
            defaultextension=".png",
            filetypes=[("PNG files", "*.png"), ("All files", "*.*")],
            title="Export Contact Details as PNG"
        )
        if not filename:
            return

        try:
            export_details_png(self.app.details.states, filename)
        except Exception as e:
            logger.error(f"Error exporting PNG: {e}")
            messagebox.showerror("Error", f"Failed to export PNG: {str(e)}")
            return

        self.app.update_status(f"🖼️ Exported details to {os.path.basename(filename)}")
