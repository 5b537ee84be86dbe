"""Realtime infrastructure (Socket.IO).

This package holds the attendance broadcast hub: the Socket.IO server, the
connection registry it owns, and sync publishers for Django views.
"""
