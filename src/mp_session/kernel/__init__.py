"""Kernel – error hierarchy shared by every mp-session package."""
