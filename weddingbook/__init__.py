# weddingbook package
"""
Wedding planner address book with a contact details panel
"""
