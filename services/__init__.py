"""Validation, request building and submission services."""
