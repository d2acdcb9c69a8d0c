# content_admin/auth/__init__.py
"""
Cookie-session authentication: a session store, the gate that issues and
checks sessions, and the view decorators built on top of it.
"""
