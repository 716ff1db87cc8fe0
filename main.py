import sys
import logging
import tkinter as tk
from tkinter import messagebox

from weddingbook.constants import COLORS, APP_TITLE, WINDOW_WIDTH, WINDOW_HEIGHT, WEDDINGBOOK_VERSION
from weddingbook.data_management import DataManagement
from weddingbook.display_format import name_and_partner
from weddingbook.models import AddressBook
from weddingbook.ui_setup import UISetup, READY_MESSAGE
from weddingbook.utils import setup_logging

logger = logging.getLogger(__name__)


class WeddingBookApp:
    def __init__(self, root, book=None):
        logger.info(f"Initializing WeddingBook v{WEDDINGBOOK_VERSION}")
        self.root = root
        self.root.title(APP_TITLE)
        self.root.geometry(f"{WINDOW_WIDTH}x{WINDOW_HEIGHT}")
        self.root.configure(bg=COLORS['background'])

        self.book = book or AddressBook()
        self.listed_names = []  # Contact list row -> person name
        self.status_timer = None

        self.data = DataManagement(self)

        logger.info("Setting up UI")
        self.ui = UISetup(self)
        self.ui.setup_styles()
        self.ui.setup_ui()

        self.refresh_contact_list()
        logger.info("WeddingBookApp initialized successfully")

    def set_address_book(self, book):
        self.book = book
        self.refresh_contact_list()

    def refresh_contact_list(self):
        """Refill the contact list and go back to the empty details state"""
        self.contact_list.delete(0, tk.END)
        self.listed_names = []
        for person in self.book.persons():
            self.contact_list.insert(tk.END, f"{name_and_partner(person)}  ·  {person.type.display()}")
            self.listed_names.append(person.name)
        self.details.render(None)

    def on_contact_selected(self, event=None):
        selection = self.contact_list.curselection()
        person = self.book.get(self.listed_names[selection[0]]) if selection else None
        self.details.render(person)

    def clear_selection(self, event=None):
        self.contact_list.selection_clear(0, tk.END)
        self.details.render(None)

    def update_status(self, message, duration=5000):
        """Update the status bar with a message that disappears after a duration"""
        self.status_label.config(text=message)

        if self.status_timer:
            self.root.after_cancel(self.status_timer)

        self.status_timer = self.root.after(duration, self.clear_status)

    def clear_status(self):
        self.status_label.config(text=READY_MESSAGE)
        self.status_timer = None

    def load_data(self):
        self.data.load_data()

    def save_data(self):
        self.data.save_data()

    def export_to_png(self):
        self.data.export_to_png()


def run(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    setup_logging()
    try:
        root = tk.Tk()
        app = WeddingBookApp(root)
        if argv:
            app.data.load_file(argv[0])
        root.mainloop()
    except Exception as e:
        logger.critical(f"Unhandled exception in main loop: {e}", exc_info=True)
        messagebox.showerror("Fatal Error", f"A critical error occurred: {e}")


if __name__ == "__main__":
    run()
